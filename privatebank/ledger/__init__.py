"""In-memory ledger package."""

from privatebank.ledger.store import Ledger

__all__ = ["Ledger"]
