"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for account persistence.
This allows us to:
1. Keep the JSON file layout out of the bank's business logic
2. Use in-memory storage for testing
3. Swap the file format later without touching PrivateBank

The interface is intentionally small. An account is always written in full;
there are no partial updates.
"""

from abc import ABC, abstractmethod

from privatebank.exceptions import BankError
from privatebank.models.transaction import TransactionRecord


class AccountStorageInterface(ABC):
    """
    Abstract interface for account storage operations.

    Any storage implementation (JSON files, SQLite, etc.)
    must implement these methods.
    """

    @abstractmethod
    def load_all(self) -> dict[str, list[TransactionRecord]]:
        """
        Read every stored account.

        Returns:
            Mapping of account name to its transactions, in stored order

        Raises:
            StorageError: If the backend cannot be read
            CodecError: If a stored account cannot be decoded
        """
        pass

    @abstractmethod
    def save_account(
        self,
        account: str,
        transactions: list[TransactionRecord],
    ) -> None:
        """
        Replace the stored state of one account.

        Args:
            account: Account name
            transactions: The account's complete transaction list

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def delete_account(self, account: str) -> None:
        """
        Remove every stored trace of an account.

        Deleting an account that was never stored is not an error.

        Raises:
            StorageError: If the removal fails
        """
        pass


class StorageError(BankError):
    """Base exception for storage operations."""
    pass


class CodecError(StorageError):
    """Stored data could not be encoded or decoded."""
    pass
