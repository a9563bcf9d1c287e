"""Application configuration from environment variables."""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Civil calendar used to resolve "now"
    timezone: str = Field(default="UTC", alias="TIMEZONE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # API
    api_allowed_origins: list[str] = Field(
        default=["http://localhost:5173"],
        alias="API_ALLOWED_ORIGINS",
    )
    timeline_span_months_max: int = Field(default=24, ge=1, alias="TIMELINE_SPAN_MONTHS_MAX")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()


def local_now() -> datetime:
    """Current wall-clock time in the configured zone, as a naive datetime."""
    tz = ZoneInfo(get_settings().timezone)
    return datetime.now(tz).replace(tzinfo=None, microsecond=0)
