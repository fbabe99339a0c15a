"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODULES_API_URL = "https://68719baa76a5723aacd25f94.mockapi.io/api/tgcc"


class Settings(BaseSettings):
    """Application settings."""

    # Remote store
    modules_api_url: str = DEFAULT_MODULES_API_URL
    # None keeps the transport default
    modules_api_timeout: float | None = None

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s: %(name)s: %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
