"""Services package."""

from privatebank.services.storage import (
    AccountStorageInterface,
    CodecError,
    JsonFileAccountStorage,
    StorageError,
)

__all__ = [
    # Storage services
    "AccountStorageInterface",
    "CodecError",
    "JsonFileAccountStorage",
    "StorageError",
]
