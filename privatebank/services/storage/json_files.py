"""
JSON File Storage Implementation

DESIGN DECISION: Each account lives in its own file,
`<directory>/Konto_<account>.json`, holding the account's complete
transaction list. This keeps the files readable and easy to back up, and
makes a mutation touch exactly one file.

TRADEOFFS:
- Every mutation rewrites the whole account (fine at personal scale)
- No cross-account transactions
- Single writer only; there is no file locking

Writes go to a temporary file in the same directory which is then moved over
the target with os.replace, so a crash leaves either the old or the new file,
never a truncated one.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import structlog

from privatebank.models.transaction import TransactionRecord
from privatebank.services.storage.codec import decode_transactions, encode_transactions
from privatebank.services.storage.interface import (
    AccountStorageInterface,
    CodecError,
    StorageError,
)


ACCOUNT_FILE_PREFIX = "Konto_"
ACCOUNT_FILE_SUFFIX = ".json"


def account_file_name(account: str) -> str:
    """File name used for an account."""
    return f"{ACCOUNT_FILE_PREFIX}{account}{ACCOUNT_FILE_SUFFIX}"


def account_name_from_file(file_name: str) -> Optional[str]:
    """
    Extract the account name from `Konto_<name>.json`.

    Returns None for files that do not follow the convention.
    """
    if not file_name.startswith(ACCOUNT_FILE_PREFIX):
        return None
    if not file_name.endswith(ACCOUNT_FILE_SUFFIX):
        return None
    name = file_name[len(ACCOUNT_FILE_PREFIX):-len(ACCOUNT_FILE_SUFFIX)]
    return name or None


class JsonFileAccountStorage(AccountStorageInterface):
    """
    Directory of per-account JSON files.

    The directory is created on first use.
    """

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory)
        self._logger = structlog.get_logger(__name__)

    @property
    def directory(self) -> Path:
        return self._directory

    def ensure_directory(self) -> None:
        """Create the storage directory (and parents) if it is missing."""
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Cannot create storage directory {self._directory}: {e}"
            ) from e

    def account_path(self, account: str) -> Path:
        """Path of an account's file; rejects names that cannot be a file in the directory."""
        if (
            not account
            or "/" in account
            or os.sep in account
            or "\x00" in account
            or account in (".", "..")
        ):
            raise StorageError(f"Account name cannot be stored as a file: {account!r}")
        return self._directory / account_file_name(account)

    def load_all(self) -> dict[str, list[TransactionRecord]]:
        self.ensure_directory()

        try:
            entries = sorted(self._directory.iterdir())
        except OSError as e:
            raise StorageError(f"Cannot list {self._directory}: {e}") from e

        accounts: dict[str, list[TransactionRecord]] = {}
        for path in entries:
            account = account_name_from_file(path.name)
            if account is None or not path.is_file():
                continue

            try:
                text = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise CodecError(f"{path}: not valid UTF-8: {e}") from e
            except OSError as e:
                raise StorageError(f"Cannot read {path}: {e}") from e

            accounts[account] = decode_transactions(text, source=str(path))
            self._logger.debug(
                "account_file_loaded",
                account=account,
                transactions=len(accounts[account]),
            )

        self._logger.info(
            "accounts_loaded",
            directory=str(self._directory),
            accounts=len(accounts),
        )
        return accounts

    def save_account(
        self,
        account: str,
        transactions: list[TransactionRecord],
    ) -> None:
        path = self.account_path(account)
        payload = encode_transactions(transactions)

        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{ACCOUNT_FILE_PREFIX}",
                suffix=".tmp",
                dir=self._directory,
            )
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    self._logger.exception("temp_file_cleanup_failed", path=tmp_path)

        self._logger.debug(
            "account_file_written",
            account=account,
            path=str(path),
            transactions=len(transactions),
        )

    def delete_account(self, account: str) -> None:
        path = self.account_path(account)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot delete {path}: {e}") from e

        self._logger.debug("account_file_deleted", account=account, path=str(path))
