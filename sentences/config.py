"""
Application Configuration
=========================

Centralized configuration using Pydantic Settings for type-safe environment variables.
All config is loaded from environment variables or a .env file.

Environment Setup:
------------------
For local development, create a .env file next to the working directory with:
    DATABASE_PATH=sentences.db
    DEFAULT_ACTOR=jane.doe
    DEBUG=true

Storage:
--------
Documents live in a single local SQLite file accessed through aiosqlite.
DATABASE_URL may point somewhere else entirely (e.g. an in-memory database
for throwaway sessions).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings provides:
    - Automatic type coercion (str -> int, etc.)
    - Validation with clear error messages
    - .env file support
    - Case-insensitive matching
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # DATABASE_PATH == database_path
        extra="ignore",
        populate_by_name=True,  # Allow both field name and alias
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = "Sentences"
    debug: bool = False  # Set DEBUG=true for verbose logging
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # -------------------------------------------------------------------------
    # SQLite Storage Configuration
    # -------------------------------------------------------------------------
    database_url_override: str | None = Field(None, alias="DATABASE_URL")
    database_path: str = "sentences.db"

    @property
    def database_url(self) -> str:
        """
        Get async SQLite connection URL.

        Priority:
        1. DATABASE_URL env var
        2. Constructed from DATABASE_PATH

        A plain 'sqlite://' URL is rewritten to 'sqlite+aiosqlite://'
        so the async engine can use it.
        """
        if self.database_url_override:
            url = self.database_url_override
            if url.startswith("sqlite://"):
                url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
            return url
        return f"sqlite+aiosqlite:///{self.database_path}"

    # -------------------------------------------------------------------------
    # Documents & History
    # -------------------------------------------------------------------------
    default_actor: str = "local.user"  # Who edits when the caller doesn't say
    history_limit: int = Field(default=50, ge=1)  # Max entries per history listing
    retain_deletion_records: bool = True  # Keep a "deleted" tombstone after cascade

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# Global settings instance - import this throughout the app
# Usage: from sentences.config import settings
settings = get_settings()
