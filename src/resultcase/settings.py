"""Environment-based configuration using pydantic-settings.

Only diagnostics are configurable; Result semantics never change with
configuration.

Example:
    >>> from resultcase.settings import get_settings
    >>> get_settings().logging.log_violations
    True

    # Or with environment variables:
    # RESULTCASE_LOG_LEVEL=DEBUG
    # RESULTCASE_LOG_LOG_VIOLATIONS=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_LOG_",
        extra="ignore",
    )

    level: LevelName = "INFO"
    format: Literal["json", "text"] = "text"
    log_violations: bool = Field(default=True, description="Log each ContractViolation before raising it")
    violation_level: LevelName = "DEBUG"

    @field_validator("level", "violation_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ResultcaseSettings(BaseSettings):
    """Root settings for resultcase.

    Example environment variables:
        RESULTCASE_DEBUG=true
        RESULTCASE_LOG_LEVEL=DEBUG
        RESULTCASE_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultcaseSettings:
    """Get the global settings instance (cached)."""
    return ResultcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
