"""Foundation layer: configuration shared by the Result core and its adapters."""

from .config import RailcaseSettings, clear_settings_cache, get_settings

__all__ = ["RailcaseSettings", "clear_settings_cache", "get_settings"]
