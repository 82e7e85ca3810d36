"""Log levels.

yadu does not define its own level scale: it uses the standard-library
``logging`` integers, so records coming from ``logging`` and from the
:class:`~yadu.logger.Logger` facade compare directly.
"""

from __future__ import annotations

import logging
from typing import Literal

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = WARN = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

Tier = Literal["debug", "info", "warn", "error"]

# Ordered highest first for nearest-lower lookup
_NAMES: tuple[tuple[int, str], ...] = (
    (CRITICAL, "CRITICAL"),
    (ERROR, "ERROR"),
    (WARNING, "WARN"),
    (INFO, "INFO"),
    (DEBUG, "DEBUG"),
)
_ALIASES: dict[str, int] = {
    "debug": DEBUG, "info": INFO, "warn": WARNING, "warning": WARNING,
    "error": ERROR, "critical": CRITICAL, "fatal": CRITICAL,
}


def parse_level(value: int | str) -> int:
    """Convert a level name or number to its integer value.
    
    >>> parse_level("warn")
    30
    >>> parse_level("15")
    15
    """
    match value:
        case bool():
            raise ValueError(f"invalid log level: {value!r}")
        case int():
            return value
        case str() if value.strip().lstrip("-").isdigit():
            return int(value.strip())
        case str() if (level := _ALIASES.get(value.strip().lower())) is not None:
            return level
    raise ValueError(f"invalid log level: {value!r}")


def level_name(level: int) -> str:
    """Name of a level, relative to the nearest lower known level for in-between values."""
    for base, name in _NAMES:
        if level >= base:
            return name if level == base else f"{name}+{level - base}"
    return f"DEBUG{level - DEBUG:+d}"


def tier(level: int) -> Tier:
    """Bucket a level into one of the four color tiers."""
    if level < INFO:
        return "debug"
    if level < WARNING:
        return "info"
    if level < ERROR:
        return "warn"
    return "error"
