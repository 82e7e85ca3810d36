"""Handler options and environment-based configuration using pydantic-settings.

:class:`Options` is the immutable value a handler is built from.
:class:`YaduSettings` loads the same knobs from the environment.

Example:
    >>> from yadu.foundation.config import Options, get_settings
    >>> Options(level="debug").level
    10
    >>> Options.from_settings(get_settings()).colors
    True
    
    # Or with environment variables:
    # YADU_LEVEL=DEBUG
    # YADU_TIME_FORMAT=%H:%M:%S
    # NO_COLOR=1
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Any, Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...core.flatten import ReplaceHook
from ...core.levels import INFO, parse_level

logger = logging.getLogger("yadu.config")

# strftime rendering of the classic "2006-01-02T03:04.05 MST" layout
DEFAULT_TIME_FORMAT = "%Y-%m-%dT%I:%M.%S %Z"

_DIRECTIVE = re.compile(r"%[-_0^#]?[A-Za-z]")


def _level_or_default(v: Any) -> int:
    if v is None:
        return INFO
    try:
        return parse_level(v)
    except ValueError:
        logger.warning("unknown log level %r, using INFO", v)
        return INFO


def _time_format_or_default(v: Any) -> str:
    if not v or not isinstance(v, str):
        return DEFAULT_TIME_FORMAT
    # usable: one printable line with at least one strftime directive
    if not v.isprintable() or not _DIRECTIVE.search(v.replace("%%", "")):
        logger.warning("unusable time format %r, using %r", v, DEFAULT_TIME_FORMAT)
        return DEFAULT_TIME_FORMAT
    return v


class Options(BaseModel):
    """Options for a :class:`~yadu.handler.Handler`.
    
    Attributes:
        level: Minimum enabled level (``logging`` integer or name)
        replace_attr: Hook ``(groups, attr) -> attr | None`` applied to every
            non-group attribute. Return None or ``EMPTY_ATTR`` to drop it.
            It never sees the level or the message; for the timestamp it is
            only consulted to drop it.
        time_format: strftime pattern for the timestamp
        add_source: Render the call site after the message
        colors: Emit ANSI colors
    
    Bad values are replaced by defaults instead of failing.
    """
    
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
    
    level: int = Field(default=INFO, description="Minimum enabled level")
    replace_attr: ReplaceHook | None = Field(default=None, description="Attribute rewrite/drop hook")
    time_format: str = Field(default=DEFAULT_TIME_FORMAT, description="strftime pattern for timestamps")
    add_source: bool = False
    colors: bool = True
    
    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, v: Any) -> int:
        return _level_or_default(v)
    
    @field_validator("time_format", mode="before")
    @classmethod
    def _check_time_format(cls, v: Any) -> str:
        return _time_format_or_default(v)
    
    @classmethod
    def from_settings(cls, settings: YaduSettings, **overrides: Any) -> Self:
        """Build options from environment settings; keyword overrides win."""
        return cls(**{
            "level": settings.level,
            "time_format": settings.time_format,
            "add_source": settings.add_source,
            "colors": not settings.no_color,
            **overrides,
        })


class YaduSettings(BaseSettings):
    """Handler configuration from YADU_* environment variables and ``.env``.
    
    Example environment variables:
        YADU_LEVEL=WARN
        YADU_ADD_SOURCE=true
        YADU_NO_COLOR=1  (NO_COLOR=1 works too)
    """
    
    model_config = SettingsConfigDict(
        env_prefix="YADU_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )
    
    level: int = INFO
    time_format: str = DEFAULT_TIME_FORMAT
    add_source: bool = False
    no_color: bool = Field(default=False, validation_alias=AliasChoices("YADU_NO_COLOR", "NO_COLOR"))
    
    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, v: Any) -> int:
        return _level_or_default(v)
    
    @field_validator("time_format", mode="before")
    @classmethod
    def _check_time_format(cls, v: Any) -> str:
        return _time_format_or_default(v)


@lru_cache(maxsize=1)
def get_settings() -> YaduSettings:
    """Get the global settings instance (cached)."""
    return YaduSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).
    
    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
