"""
In-Memory Ledger

Maps account names to their ordered transaction lists.

The ledger knows nothing about files or interest rates. It only enforces:
- account names are unique
- an account never holds two value-equal transactions

PrivateBank is the only caller; it decides when to persist.
"""

from typing import Optional

from privatebank.exceptions import (
    AccountAlreadyExistsError,
    AccountDoesNotExistError,
    TransactionAlreadyExistsError,
    TransactionDoesNotExistError,
)
from privatebank.models.transaction import TransactionRecord


class Ledger:
    """Account name -> list of TransactionRecord, in insertion order."""

    def __init__(self):
        self._accounts: dict[str, list[TransactionRecord]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return self._accounts == other._accounts

    def create(self, name: str) -> None:
        """Register an empty account."""
        if name in self._accounts:
            raise AccountAlreadyExistsError(f"Account already exists: {name}")
        self._accounts[name] = []

    def load(self, name: str, transactions: list[TransactionRecord]) -> None:
        """Install an account read from storage, replacing any existing entry."""
        self._accounts[name] = list(transactions)

    def get(self, name: str) -> Optional[list[TransactionRecord]]:
        """
        Get the live transaction list of an account.

        Returns None if the account does not exist. Callers that hand the
        list to the outside must copy it.
        """
        return self._accounts.get(name)

    def _require(self, name: str) -> list[TransactionRecord]:
        transactions = self._accounts.get(name)
        if transactions is None:
            raise AccountDoesNotExistError(f"Account does not exist: {name}")
        return transactions

    def contains(self, name: str, transaction: TransactionRecord) -> bool:
        """Value-equality membership test; False for unknown accounts."""
        transactions = self._accounts.get(name)
        if transactions is None:
            return False
        return transaction in transactions

    def insert(self, name: str, transaction: TransactionRecord) -> None:
        """Append a transaction unless an equal one is already present."""
        transactions = self._require(name)
        if transaction in transactions:
            raise TransactionAlreadyExistsError(
                f"Transaction already exists in account {name}"
            )
        transactions.append(transaction)

    def remove_equal(self, name: str, transaction: TransactionRecord) -> int:
        """
        Remove the first value-equal transaction.

        Returns the index it was removed from, so a failed write can put it
        back in the same place.
        """
        transactions = self._require(name)
        try:
            index = transactions.index(transaction)
        except ValueError:
            raise TransactionDoesNotExistError(
                f"Transaction does not exist in account {name}"
            )
        del transactions[index]
        return index

    def restore(self, name: str, index: int, transaction: TransactionRecord) -> None:
        """Re-insert a transaction at a position returned by remove_equal."""
        self._require(name).insert(index, transaction)

    def delete(self, name: str) -> list[TransactionRecord]:
        """Remove an account and return its transactions."""
        self._require(name)
        return self._accounts.pop(name)

    def names(self) -> list[str]:
        """All account names in lexicographic order."""
        return sorted(self._accounts)
