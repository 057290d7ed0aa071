"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so that the logging behaviour of the observation
helpers can be tuned per deployment without code changes:

    RAILTRACK_LOG_LEVEL=DEBUG
    RAILTRACK_LOG_JSON=true
    RAILTRACK_TEE_LOG_LEVEL=DEBUG
    RAILTRACK_FAILURE_LOG_LEVEL=ERROR

The algebra itself reads no configuration; only railtrack.logs and
railtrack.observe do.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RailtrackSettings(BaseSettings):
    """
    Settings for logging and the logging tees.

    Load order (highest priority first):
      1. Environment variables (RAILTRACK_ prefix)
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Minimum level structlog emits")
    log_json: bool = Field(default=False, description="Render JSON lines instead of console output")
    tee_log_level: str = Field(default="INFO", description="Level used when logging a Pass")
    failure_log_level: str = Field(default="WARNING", description="Level used when logging a Fail")

    @field_validator("log_level", "tee_log_level", "failure_log_level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Accept standard level names in any case, store them upper-cased."""
        name = value.strip().upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return name


@lru_cache(maxsize=1)
def get_settings() -> RailtrackSettings:
    """Return the process-wide settings, loaded on first use."""
    return RailtrackSettings()
