"""Core data model: attributes, levels, records and attribute flattening."""

from .attr import (
    BAD_KEY,
    EMPTY_ATTR,
    LEVEL_KEY,
    MESSAGE_KEY,
    SOURCE_KEY,
    TIME_KEY,
    Attr,
    Group,
    Lazy,
    LogValuer,
    attrs_from,
    group,
    resolve,
)
from .flatten import AttrMap, ReplaceHook, flatten, merge
from .levels import CRITICAL, DEBUG, ERROR, INFO, WARN, WARNING, level_name, parse_level, tier
from .record import Record, Source

__all__ = [
    # Attributes
    "Attr", "Group", "Lazy", "LogValuer", "EMPTY_ATTR", "BAD_KEY",
    "TIME_KEY", "LEVEL_KEY", "MESSAGE_KEY", "SOURCE_KEY",
    "attrs_from", "group", "resolve",
    # Flattening
    "AttrMap", "ReplaceHook", "flatten", "merge",
    # Levels
    "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL", "level_name", "parse_level", "tier",
    # Records
    "Record", "Source",
]
