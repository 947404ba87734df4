"""
Data Models Package

This package contains the pydantic transaction models used by PrivateBank.
Every record stored in an account is one of these variants.
"""

from privatebank.models.transaction import (
    TRANSACTION_KINDS,
    IncomingTransfer,
    OutgoingTransfer,
    Payment,
    Transaction,
    TransactionRecord,
    Transfer,
    calculate,
)

__all__ = [
    "TRANSACTION_KINDS",
    "IncomingTransfer",
    "OutgoingTransfer",
    "Payment",
    "Transaction",
    "TransactionRecord",
    "Transfer",
    "calculate",
]
