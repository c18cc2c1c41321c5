"""Configuration management using pydantic-settings."""

from .settings import (
    DbQuerySettings,
    DebugSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DbQuerySettings",
    "DebugSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
