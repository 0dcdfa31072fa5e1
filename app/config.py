# /app/app/config.py

from __future__ import annotations

import logging

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Project-wide configuration read from environment variables.
    Pydantic v2 + pydantic-settings.
    """
    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # --- Core ---
    ENVIRONMENT: str = Field("dev", description="Application environment (dev, test, prod)")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- Database ---
    # Required, no default
    DATABASE_URL: str = Field(..., description="Async database connection URL (e.g., postgresql+asyncpg://...)")
    DB_ECHO: bool = Field(False, description="Echo SQL statements issued by the engine")
    DB_POOL_SIZE: int = Field(5, description="Connection pool size for the async engine")

    @model_validator(mode='after')
    def normalize_database_url(self) -> 'Settings':
        # Sync-style Postgres URLs are rewritten for the asyncpg driver
        if self.DATABASE_URL.startswith("postgresql://"):
            log.debug("Rewriting DATABASE_URL scheme postgresql:// -> postgresql+asyncpg://")
            self.DATABASE_URL = self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif self.DATABASE_URL.startswith("postgresql+psycopg2://"):
            log.debug("Rewriting DATABASE_URL scheme postgresql+psycopg2:// -> postgresql+asyncpg://")
            self.DATABASE_URL = self.DATABASE_URL.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        return self


try:
    settings = Settings()
    log.info("Settings loaded successfully for ENVIRONMENT=%s", settings.ENVIRONMENT)
    log.debug("Loaded settings: DB URL=%s..., echo=%s, pool size=%d",
              settings.DATABASE_URL[:25], settings.DB_ECHO, settings.DB_POOL_SIZE)
except Exception as e:
    log.exception("Failed to instantiate Settings.")
    raise e
