"""Foundation: configuration and error types."""

from .config import DEFAULT_TIME_FORMAT, Options, YaduSettings, clear_settings_cache, get_settings
from .errors import ErrorCode, LogError, SerializationError, WriteError, YaduException

__all__ = [
    "DEFAULT_TIME_FORMAT", "Options", "YaduSettings", "clear_settings_cache", "get_settings",
    "ErrorCode", "LogError", "YaduException", "SerializationError", "WriteError",
]
