"""Configuration via environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Mirrors the 15 s default of the HTTP client the consumer normally uses.
DEFAULT_TIMEOUT = 15.0

# Bright Sky switches to daily records for ranges longer than this.
DEFAULT_DAILY_THRESHOLD_DAYS = 2.0


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    All settings are prefixed with their section for clarity:
      - FIXTURES_* for the fixture store and mock client
      - LOG_LEVEL for logging
    """

    model_config = {"env_prefix": "", "case_sensitive": False}

    # --- Fixtures ---
    fixtures_dir: Path | None = Field(
        default=None,
        description="Directory holding the *_weather.json files (bundled data if unset)",
    )
    fixtures_timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Timeout advertised by the mock client"
    )
    fixtures_daily_threshold_days: float = Field(
        default=DEFAULT_DAILY_THRESHOLD_DAYS,
        ge=0,
        description="Date spans longer than this many days are served daily data",
    )

    # --- General ---
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("fixtures_dir")
    @classmethod
    def validate_fixtures_dir(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_dir():
            raise ValueError(f"fixtures_dir must be an existing directory, got '{v}'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"log_level must be one of {valid}")
        return v.upper()
