"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Calendar
    timezone: str = Field(default="UTC", alias="TIMEZONE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Forecast
    month_concurrency: int = Field(default=8, ge=1, alias="MONTH_CONCURRENCY")
    event_scan_max_days: int = Field(default=366, ge=1, alias="EVENT_SCAN_MAX_DAYS")

    # Site
    site_url: str = Field(default="http://localhost:3000", alias="SITE_URL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
