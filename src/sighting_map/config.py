"""
Application settings.

Values come from environment variables prefixed ``SIGHTING_MAP_`` (or a
``.env`` file in the working directory), e.g. ``SIGHTING_MAP_TIMEZONE``.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI and build flow."""

    model_config = SettingsConfigDict(
        env_prefix="SIGHTING_MAP_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "sighting-map"
    app_env: str = "development"
    debug: bool = False

    data_dir: Path = Path("data")
    timezone: str = "America/New_York"
    api_port: int = 8000

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except ZoneInfoNotFoundError:
            msg = f"Unknown timezone: {value}"
            raise ValueError(msg) from None
        return value

    @property
    def sightings_path(self) -> Path:
        return self.data_dir / "sightings.json"

    @property
    def site_dir(self) -> Path:
        return self.data_dir / "site"

    def now(self) -> datetime:
        """Current instant in the configured timezone."""
        return datetime.now(ZoneInfo(self.timezone))


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
