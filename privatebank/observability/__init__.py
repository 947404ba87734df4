"""Logging package."""

from privatebank.observability.logging import configure_logging

__all__ = ["configure_logging"]
