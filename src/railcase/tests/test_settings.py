"""Tests for environment-based settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from railcase import clear_settings_cache, get_settings
from railcase.foundation.config import LoggingSettings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.validation.default_message == "Validation failed"
    assert settings.chain.log_absorbed is True
    assert settings.chain.log_short_circuit is False


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAILCASE_LOG_LEVEL", "debug")
    monkeypatch.setenv("RAILCASE_LOG_FORMAT", "json")
    monkeypatch.setenv("RAILCASE_CHAIN_LOG_SHORT_CIRCUIT", "true")
    clear_settings_cache()

    settings = get_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.chain.log_short_circuit is True


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAILCASE_DEBUG", "1")
    clear_settings_cache()

    assert get_settings().effective_log_level == "DEBUG"


def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RAILCASE_LOG_FORMAT", "xml")

    with pytest.raises(ValidationError):
        LoggingSettings()
