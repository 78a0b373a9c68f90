"""Shared fixtures: isolate settings and global logging between tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from railcase.foundation.config import clear_settings_cache
from railcase.observability import configure_logging


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop RAILCASE_* variables and cached settings around every test."""
    for key in [k for k in os.environ if k.startswith("RAILCASE_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    configure_logging(format="none")
    yield
    configure_logging(format="none")
