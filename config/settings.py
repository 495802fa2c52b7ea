"""Environment-driven settings via pydantic-settings.

Only logging is configurable; console output never depends on settings.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("text", "json")


class Settings(BaseSettings):
    """Application settings read from ``FUNCVALUES_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="FUNCVALUES_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: str = "text"

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def check_format(cls, v: str) -> str:
        fmt = v.strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {v!r}")
        return fmt


@lru_cache
def get_settings() -> Settings:
    return Settings()
