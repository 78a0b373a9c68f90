"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    ChainSettings,
    LoggingSettings,
    RailcaseSettings,
    ValidationSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ChainSettings",
    "LoggingSettings",
    "RailcaseSettings",
    "ValidationSettings",
    "clear_settings_cache",
    "get_settings",
]
