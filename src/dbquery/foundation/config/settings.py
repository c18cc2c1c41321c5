"""Environment-based configuration using pydantic-settings.

Only the ambient concerns are configurable: how the package logs and whether
debug tracing is active. Query semantics never depend on configuration.

Example:
    >>> from dbquery.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'
    >>> settings.debug.enabled
    True

    # Or with environment variables:
    # DBQUERY_LOG_LEVEL=DEBUG
    # DBQUERY_DEBUG_ENABLED=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DBQUERY_LOG_",
        extra="ignore",
    )

    level: LevelName = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class DebugSettings(BaseSettings):
    """Debug tracing configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DBQUERY_DEBUG_",
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="When false, debug() returns the query unwrapped")
    level: LevelName = Field(default="DEBUG", description="Level used by log_sink")
    max_value_length: PositiveInt = Field(default=200, description="Truncate logged values beyond this many characters")


class DbQuerySettings(BaseSettings):
    """Root settings for dbquery.

    Loads configuration from environment variables with DBQUERY_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        DBQUERY_LOG_LEVEL=DEBUG
        DBQUERY_LOG_FORMAT=json
        DBQUERY_DEBUG_ENABLED=false
        DBQUERY_DEBUG_MAX_VALUE_LENGTH=80
    """

    model_config = SettingsConfigDict(
        env_prefix="DBQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    debug: DebugSettings = Field(default_factory=DebugSettings)


@lru_cache(maxsize=1)
def get_settings() -> DbQuerySettings:
    """Get the global settings instance (cached)."""
    return DbQuerySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
