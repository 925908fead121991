"""
Runtime settings for the Cat Distribution System.

Settings are read from ``CATDIST_``-prefixed environment variables (or a
``.env`` file) by pydantic-settings, so the service can point at another
operation-log backend or use a different default page size without
code changes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATDIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base URL of the external operation-log service. The client appends
    # ``/operationLogs`` to it.
    log_api_url: str = (
        "https://catdistribution-backend-eqfuhfbffzcuandb.polandcentral-01.azurewebsites.net"
    )
    http_timeout: float = Field(default=10.0, gt=0)

    page_size: int = Field(default=9, gt=0)
    generation_interval_ms: int = Field(default=1000, gt=0)

    # Active session user. Operation logging is disabled when no id is set.
    user_id: Optional[str] = None
    username: str = ""


# Page sizes offered by the list screen.
PAGE_SIZE_OPTIONS = (3, 6, 9, 12)

# Bundled sample collection loaded at startup.
DATA_FILE = Path(__file__).resolve().parent / "data" / "sample_cats.json"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
