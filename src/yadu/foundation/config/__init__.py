"""Configuration management using pydantic-settings."""

from .settings import DEFAULT_TIME_FORMAT, Options, YaduSettings, clear_settings_cache, get_settings

__all__ = ["DEFAULT_TIME_FORMAT", "Options", "YaduSettings", "clear_settings_cache", "get_settings"]
