"""yadu - human-readable structured logging with YAML attribute trees.

Renders each log event as a single colorized line followed by its
attributes as an indented tree instead of flat ``key=value`` pairs::

    2026-10-18T09:41.07 CEST INFO: attack
        enemy:
            alive: true
            health: 10

Quick Start:
    >>> from yadu import Lazy, configure_logging, group
    >>>
    >>> log = configure_logging(level="debug")
    >>> log.info("attack", "enemy", enemy, spawn=199)
    >>>
    >>> # Groups nest attributes; lazy values are computed only when rendered
    >>> log.debug("state", group("world", size="600x800"), dump=Lazy(world.dump))

Handler only (bring your own facade):
    >>> from yadu import Handler, Record, attrs_from
    >>> h = Handler.create(sys.stdout, colors=False).with_group("http")
    >>> h.handle(Record(INFO, "request", attrs=attrs_from(status=200)))

Standard-library logging:
    >>> from yadu.bridge import YaduLogHandler
    >>> logging.getLogger().addHandler(YaduLogHandler())
"""

from .core import (
    CRITICAL,
    DEBUG,
    EMPTY_ATTR,
    ERROR,
    INFO,
    LEVEL_KEY,
    MESSAGE_KEY,
    SOURCE_KEY,
    TIME_KEY,
    WARN,
    WARNING,
    Attr,
    Group,
    Lazy,
    LogValuer,
    Record,
    Source,
    attrs_from,
    flatten,
    group,
    level_name,
    parse_level,
    resolve,
)
from .foundation import (
    DEFAULT_TIME_FORMAT,
    ErrorCode,
    LogError,
    Options,
    SerializationError,
    WriteError,
    YaduException,
    YaduSettings,
    get_settings,
)
from .handler import Handler
from .logger import Logger, configure_logging, get_logger, set_default

__version__ = "0.2.0"

__all__ = [
    # Handler & facade
    "Handler", "Logger", "configure_logging", "get_logger", "set_default",
    # Attributes
    "Attr", "Group", "Lazy", "LogValuer", "EMPTY_ATTR", "attrs_from", "group", "resolve", "flatten",
    "TIME_KEY", "LEVEL_KEY", "MESSAGE_KEY", "SOURCE_KEY",
    # Records & levels
    "Record", "Source", "DEBUG", "INFO", "WARN", "WARNING", "ERROR", "CRITICAL", "level_name", "parse_level",
    # Configuration
    "Options", "YaduSettings", "get_settings", "DEFAULT_TIME_FORMAT",
    # Errors
    "ErrorCode", "LogError", "YaduException", "SerializationError", "WriteError",
]
