"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    unsplash_access_key: str
    unsplash_url: str = "https://api.unsplash.com/photos"
    unsplash_per_page: int = 30
    gists_url: str = "https://api.github.com/gists/public"
    http_timeout_seconds: float = 15.0
    log_level: str = "INFO"
    store_path: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_store_path(raw: str | None) -> Path | None:
    """Parse the preferences file location from env."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    return Path(cleaned).expanduser()
