"""Configuration package."""

from privatebank.config.settings import BankSettings, get_settings

__all__ = [
    "BankSettings",
    "get_settings",
]
