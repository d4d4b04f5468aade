"""Configuration for the order ledger."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DuplicatePolicy = Literal["reject", "last_write_wins"]


class LedgerSettings(BaseSettings):
    """
    Order ledger configuration.

    All settings can be overridden via environment variables
    with the ORDER_LEDGER_ prefix (e.g. ORDER_LEDGER_DUPLICATE_POLICY).
    """

    # Registry behaviour
    duplicate_policy: DuplicatePolicy = Field(
        default="reject",
        description="reject: add_* fails on an existing identifier; "
        "last_write_wins: the existing entity is updated in place",
    )

    # Order identifiers
    order_id_prefix: str = Field(default="ORD", min_length=1)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_json: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="ORDER_LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> LedgerSettings:
    """Cached settings instance."""
    return LedgerSettings()
