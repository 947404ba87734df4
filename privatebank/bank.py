"""
PrivateBank Facade

This module ties together the ledger, the transaction models and the
account storage, and is the only entry point front-ends use.

Flow of every mutation:
1. Validate (account exists, transaction acceptable)
2. Mutate the in-memory ledger
3. Rewrite the affected account's file
4. If the write fails, undo step 2 and re-raise

DESIGN DECISION: The bank's interest rates are the source of truth for
Payments. A Payment passed to add_transaction is never modified; a copy
carrying the bank's current rates is stored instead. Lookups normalize
Payments the same way, so the caller can keep using the object it added.
"""

from decimal import Decimal
from pathlib import Path
from typing import Iterable, Optional, Union

import structlog

from privatebank.config import BankSettings, get_settings
from privatebank.exceptions import (
    AccountDoesNotExistError,
    TransactionAlreadyExistsError,
    TransactionAttributeError,
    TransactionDoesNotExistError,
)
from privatebank.ledger import Ledger
from privatebank.models.transaction import (
    Payment,
    TransactionRecord,
    calculate,
    check_interest,
    check_representable,
    to_decimal,
)
from privatebank.observability import configure_logging
from privatebank.services.storage import (
    AccountStorageInterface,
    JsonFileAccountStorage,
    StorageError,
)


logger = structlog.get_logger(__name__)


def _validate_rate(value, field_name: str) -> Decimal:
    """Convert a bank interest rate to Decimal and check it lies in [0, 1]."""
    rate = check_interest(to_decimal(value, field_name), field_name)
    return check_representable(rate, field_name)


class PrivateBank:
    """
    A bank managing named accounts and their transactions.

    Every account is persisted through the storage backend (by default one
    JSON file per account in `directory`). Existing accounts are loaded
    when the bank is constructed.
    """

    def __init__(
        self,
        name: str,
        incoming_interest,
        outgoing_interest,
        directory: Union[str, Path],
        storage: Optional[AccountStorageInterface] = None,
    ):
        """
        Initialize the bank and load all stored accounts.

        Args:
            name: Display name of the bank
            incoming_interest: Rate applied to deposit Payments (0-1)
            outgoing_interest: Rate applied to withdrawal Payments (0-1)
            directory: Directory holding the account files
            storage: Storage backend. Defaults to JSON files in `directory`.

        Raises:
            TransactionAttributeError: If a rate is outside [0, 1]
            StorageError: If the directory or an account file cannot be read
        """
        self._name = name
        self.incoming_interest = incoming_interest
        self.outgoing_interest = outgoing_interest
        self._directory = Path(directory)
        self._storage = storage or JsonFileAccountStorage(self._directory)
        self._ledger = Ledger()

        for account, transactions in self._storage.load_all().items():
            self._ledger.load(account, transactions)

        logger.info(
            "bank_initialized",
            bank=self._name,
            directory=str(self._directory),
            accounts=len(self._ledger),
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[BankSettings] = None,
    ) -> "PrivateBank":
        """Build a bank (and configure logging) from BankSettings."""
        settings = settings or get_settings()
        configure_logging(settings.log_level, settings.log_json)
        return cls(
            name=settings.name,
            incoming_interest=settings.incoming_interest,
            outgoing_interest=settings.outgoing_interest,
            directory=settings.directory,
        )

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def incoming_interest(self) -> Decimal:
        return self._incoming_interest

    @incoming_interest.setter
    def incoming_interest(self, value) -> None:
        self._incoming_interest = _validate_rate(value, "incoming_interest")

    @property
    def outgoing_interest(self) -> Decimal:
        return self._outgoing_interest

    @outgoing_interest.setter
    def outgoing_interest(self, value) -> None:
        self._outgoing_interest = _validate_rate(value, "outgoing_interest")

    @property
    def directory(self) -> Path:
        return self._directory

    def __repr__(self) -> str:
        return (
            f"PrivateBank(name={self._name!r}, "
            f"incoming_interest={self._incoming_interest}, "
            f"outgoing_interest={self._outgoing_interest}, "
            f"accounts={self._ledger.names()})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrivateBank):
            return NotImplemented
        return (
            self._name == other._name
            and self._incoming_interest == other._incoming_interest
            and self._outgoing_interest == other._outgoing_interest
            and self._ledger == other._ledger
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _normalize(self, transaction: TransactionRecord) -> TransactionRecord:
        """Apply the bank's rates to a Payment; other records pass through."""
        if not isinstance(transaction, TransactionRecord):
            raise TransactionAttributeError(
                f"Not a transaction record: {type(transaction).__name__}"
            )
        if isinstance(transaction, Payment):
            return transaction.with_interest(
                self._incoming_interest,
                self._outgoing_interest,
            )
        return transaction

    def _lookup_forms(self, transaction: TransactionRecord) -> list[TransactionRecord]:
        """
        Values a stored copy of `transaction` may have.

        The normalized form matches Payments added through this bank; the
        original form matches Payments stored under earlier rates.
        """
        normalized = self._normalize(transaction)
        if normalized == transaction:
            return [normalized]
        return [normalized, transaction]

    def _require_account(self, account: str) -> list[TransactionRecord]:
        transactions = self._ledger.get(account)
        if transactions is None:
            raise AccountDoesNotExistError(f"Account does not exist: {account}")
        return transactions

    def _persist(self, account: str) -> None:
        self._storage.save_account(account, self._ledger.get(account))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_account(
        self,
        account: str,
        transactions: Optional[Iterable[TransactionRecord]] = None,
    ) -> None:
        """
        Create an account, optionally pre-filled with transactions.

        Duplicates among `transactions` are skipped with a log notice
        instead of failing the call.

        Raises:
            AccountAlreadyExistsError: If the account already exists
            TransactionAttributeError: If an entry is not a transaction record
            StorageError: If the account file cannot be written
        """
        records = [self._normalize(tx) for tx in transactions or []]

        self._ledger.create(account)
        for record in records:
            try:
                self._ledger.insert(account, record)
            except TransactionAlreadyExistsError:
                logger.info(
                    "duplicate_transaction_skipped",
                    account=account,
                    kind=record.kind,
                    date=record.date,
                    description=record.description,
                )

        try:
            self._persist(account)
        except StorageError:
            self._ledger.delete(account)
            raise

        logger.info(
            "account_created",
            account=account,
            transactions=len(self._ledger.get(account)),
        )

    def add_transaction(self, account: str, transaction: TransactionRecord) -> None:
        """
        Append a transaction to an account.

        Payments are stored with the bank's current interest rates.

        Raises:
            AccountDoesNotExistError: If the account does not exist
            TransactionAlreadyExistsError: If an equal transaction is stored
            TransactionAttributeError: If `transaction` is not a record
            StorageError: If the account file cannot be written
        """
        self._require_account(account)
        record = self._normalize(transaction)

        self._ledger.insert(account, record)
        try:
            self._persist(account)
        except StorageError:
            self._ledger.remove_equal(account, record)
            raise

        logger.info(
            "transaction_added",
            account=account,
            kind=record.kind,
            amount=str(record.calculate()),
        )

    def remove_transaction(self, account: str, transaction: TransactionRecord) -> None:
        """
        Remove the first stored transaction equal to `transaction`.

        Raises:
            AccountDoesNotExistError: If the account does not exist
            TransactionDoesNotExistError: If no equal transaction is stored
            StorageError: If the account file cannot be written
        """
        self._require_account(account)

        for candidate in self._lookup_forms(transaction):
            if self._ledger.contains(account, candidate):
                break
        else:
            raise TransactionDoesNotExistError(
                f"Transaction does not exist in account {account}"
            )

        index = self._ledger.remove_equal(account, candidate)
        try:
            self._persist(account)
        except StorageError:
            self._ledger.restore(account, index, candidate)
            raise

        logger.info("transaction_removed", account=account, kind=candidate.kind)

    def delete_account(self, account: str) -> None:
        """
        Delete an account and its stored file.

        Raises:
            AccountDoesNotExistError: If the account does not exist
            StorageError: If the file cannot be removed
        """
        self._require_account(account)
        self._storage.delete_account(account)
        self._ledger.delete(account)

        logger.info("account_deleted", account=account)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def contains_transaction(self, account: str, transaction: TransactionRecord) -> bool:
        """True if the account holds an equal transaction; False for unknown accounts."""
        if account not in self._ledger or not isinstance(transaction, TransactionRecord):
            return False
        return any(
            self._ledger.contains(account, candidate)
            for candidate in self._lookup_forms(transaction)
        )

    def get_account_balance(self, account: str) -> Decimal:
        """Sum of calculate() over the account; 0 for unknown accounts."""
        transactions = self._ledger.get(account) or []
        return sum((calculate(tx) for tx in transactions), Decimal("0"))

    def get_transactions(self, account: str) -> list[TransactionRecord]:
        """Copy of the account's transactions; empty for unknown accounts."""
        return list(self._ledger.get(account) or [])

    def get_transactions_sorted(
        self,
        account: str,
        ascending: bool = True,
    ) -> list[TransactionRecord]:
        """Transactions ordered by calculated amount. Ties keep insertion order."""
        return sorted(
            self._ledger.get(account) or [],
            key=calculate,
            reverse=not ascending,
        )

    def get_transactions_by_type(
        self,
        account: str,
        positive: bool,
    ) -> list[TransactionRecord]:
        """
        Incoming (calculated amount >= 0) or outgoing (< 0) transactions.

        The two results together are exactly the account's transactions.
        """
        return [
            tx for tx in self._ledger.get(account) or []
            if (calculate(tx) >= 0) == positive
        ]

    def get_all_accounts(self) -> list[str]:
        """All account names in lexicographic order."""
        return self._ledger.names()
