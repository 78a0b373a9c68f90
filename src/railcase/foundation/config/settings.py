"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from railcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.validation.default_message
    'Validation failed'
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # RAILCASE_LOG_LEVEL=DEBUG
    # RAILCASE_CHAIN_LOG_SHORT_CIRCUIT=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ValidationSettings(BaseSettings):
    """Validation adapter defaults."""

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_VALIDATION_",
        extra="ignore",
    )

    default_message: str = Field(
        default="Validation failed",
        min_length=1,
        description="Message of the failure used when a validation outcome carries no error",
    )


class ChainSettings(BaseSettings):
    """Diagnostics emitted while results move through transforms and chains."""

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_CHAIN_",
        extra="ignore",
    )

    log_absorbed: bool = Field(default=True, description="Debug-log exceptions absorbed into failures")
    log_short_circuit: bool = Field(default=False, description="Debug-log every step skipped on failure")


class RailcaseSettings(BaseSettings):
    """Root settings for railcase.

    Loads configuration from environment variables with RAILCASE_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        RAILCASE_DEBUG=true
        RAILCASE_LOG_FORMAT=json
        RAILCASE_VALIDATION_DEFAULT_MESSAGE="invalid payload"
    """

    model_config = SettingsConfigDict(
        env_prefix="RAILCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    chain: ChainSettings = Field(default_factory=ChainSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG regardless of the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> RailcaseSettings:
    """Get the global settings instance (cached)."""
    return RailcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
