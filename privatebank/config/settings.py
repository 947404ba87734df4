"""
Configuration Management for PrivateBank

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: PrivateBank takes its configuration as constructor
arguments. These settings are the convenience path for front-ends that
want to configure a bank from the environment or a .env file, e.g.

    BANK_NAME=Sparkasse
    BANK_INCOMING_INTEREST=0.05
    BANK_OUTGOING_INTEREST=0.1
    BANK_DIRECTORY=./accounts
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BankSettings(BaseSettings):
    """
    Bank configuration.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    name: str = Field(
        default="PrivateBank",
        description="Display name of the bank"
    )
    incoming_interest: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=1,
        description="Interest applied to every deposit Payment (0-1)"
    )
    outgoing_interest: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=1,
        description="Interest applied to every withdrawal Payment (0-1)"
    )
    directory: Path = Field(
        default=Path("data"),
        description="Directory holding the Konto_<account>.json files"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of console lines"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case for the level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> BankSettings:
    """
    Get bank settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return BankSettings()
