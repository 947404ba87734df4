"""
PrivateBank - Source Package

A small account ledger that keeps named accounts, each with an ordered
list of transactions, and persists every account to its own JSON file.

DESIGN PRINCIPLES:
1. Transactions are immutable values, compared by value
2. Every mutation is written to disk before the call returns
3. Errors are raised to the caller, never swallowed
4. Storage layer is swappable
"""

from privatebank.bank import PrivateBank

__version__ = "1.0.0"
__author__ = "PrivateBank Team"

__all__ = ["PrivateBank"]
