"""Configuration management using Pydantic Settings.

Loads configuration from ``TRYRESULT_``-prefixed environment variables with validation.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string for log records",
    )
    log_date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S", description="Date format for log records"
    )
    log_captured_errors: bool = Field(
        default=True,
        description="Emit DEBUG records when an exception is captured into a Failure",
    )

    model_config = SettingsConfigDict(
        env_prefix="TRYRESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get library settings (singleton).

    Cached because settings are read on every capture boundary.

    Returns:
        Library settings
    """
    return Settings()
