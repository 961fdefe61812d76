"""Configuration using pydantic-settings.

Values are read from SWAPMODEL_* environment variables or a local .env file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Swap data model settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SWAPMODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Network
    # ======================
    default_network: int = Field(
        default=1, description="Network ID used when none is given (1 = Ethereum mainnet)"
    )

    # ======================
    # Rate queries
    # ======================
    referrer: Optional[str] = Field(
        default=None, description="Referrer tag appended to rate queries"
    )
    adapter_version: Optional[str] = Field(
        default=None, description="Adapter version requested from the pricing API"
    )

    # ======================
    # Partner fees
    # ======================
    partner_fee_bps: int = Field(
        default=0, ge=0, le=10000, description="Partner fee in basis points (100 = 1%)"
    )

    # ======================
    # Environment
    # ======================
    debug: bool = Field(default=False, description="Enable debug logging")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging for scripts that use the model directly."""
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
