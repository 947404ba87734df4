"""
Storage Services Package

Provides the abstract account storage interface and its JSON file
implementation, plus the tagged JSON codec both sides of the disk use.
"""

from privatebank.services.storage.interface import (
    AccountStorageInterface,
    CodecError,
    StorageError,
)
from privatebank.services.storage.codec import (
    decode_transactions,
    encode_record,
    encode_transactions,
)
from privatebank.services.storage.json_files import (
    JsonFileAccountStorage,
    account_file_name,
    account_name_from_file,
)

__all__ = [
    # Interfaces
    "AccountStorageInterface",
    # Exceptions
    "CodecError",
    "StorageError",
    # Codec
    "decode_transactions",
    "encode_record",
    "encode_transactions",
    # JSON file implementation
    "JsonFileAccountStorage",
    "account_file_name",
    "account_name_from_file",
]
