"""Logger facade over a :class:`~yadu.handler.Handler`.

Quick Start:
    >>> from yadu import configure_logging, get_logger
    >>> 
    >>> # Configure (once at startup)
    >>> configure_logging(level="debug", add_source=True)
    >>> 
    >>> log = get_logger()
    >>> log.info("connecting", enemies=100, players=2, world="600x800")
    
    >>> # Bind attributes and groups
    >>> log = log.with_(service="game").with_group("combat")
    >>> log.warn("attack", "enemy", enemy)
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TextIO

from .core.attr import attrs_from
from .core.levels import DEBUG, ERROR, INFO, WARNING, parse_level
from .core.record import Record, Source
from .handler import Handler


@dataclass(frozen=True, slots=True)
class Logger:
    """Front end for a handler. Immutable: ``with_``/``with_group`` return new loggers.
    
    Arguments after the message are attributes: :class:`~yadu.core.attr.Attr`
    objects, ``key, value`` pairs or keywords.
    
    Example:
        >>> log = Logger(Handler.create())
        >>> log.info("request", "path", "/users", status=200)
    """
    
    handler: Handler
    
    def enabled(self, level: int | str) -> bool:
        return self.handler.enabled(parse_level(level))
    
    def with_(self, *args: Any, **kw: Any) -> Logger:
        """New logger with attributes bound to every following record."""
        h = self.handler.with_attrs(attrs_from(*args, **kw))
        return self if h is self.handler else Logger(h)
    
    def bind(self, **kw: Any) -> Logger:
        return self.with_(**kw)
    
    def with_group(self, name: str) -> Logger:
        h = self.handler.with_group(name)
        return self if h is self.handler else Logger(h)
    
    def log(self, level: int | str, msg: str, *args: Any, **kw: Any) -> None:
        self._log(parse_level(level), msg, args, kw)
    
    def debug(self, msg: str, *args: Any, **kw: Any) -> None: self._log(DEBUG, msg, args, kw)
    def info(self, msg: str, *args: Any, **kw: Any) -> None: self._log(INFO, msg, args, kw)
    def warn(self, msg: str, *args: Any, **kw: Any) -> None: self._log(WARNING, msg, args, kw)
    def error(self, msg: str, *args: Any, **kw: Any) -> None: self._log(ERROR, msg, args, kw)
    
    warning = warn
    
    def _log(self, level: int, msg: str, args: tuple[Any, ...], kw: dict[str, Any]) -> None:
        if not self.handler.enabled(level):
            return
        # 0: _log, 1: debug/info/..., 2: caller
        source = _caller(2) if self.handler.options.add_source else None
        self.handler.handle(Record(level, msg, datetime.now().astimezone(), attrs_from(*args, **kw), source))


def _caller(depth: int) -> Source | None:
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None
    return Source(frame.f_code.co_filename, frame.f_lineno, frame.f_code.co_name)


# ─────────────────────────────────────────────────────────────────────────────
# Process Default
# ─────────────────────────────────────────────────────────────────────────────


_default: Logger | None = None
_default_lock = threading.Lock()


def configure_logging(output: TextIO | None = None, **options: Any) -> Logger:
    """Create a root handler from YADU_* settings plus ``options`` and make it the default logger."""
    logger = Logger(Handler.from_env(output, **options))
    set_default(logger)
    return logger


def set_default(logger: Logger) -> None:
    """Replace the process-wide default logger, visible from every thread."""
    global _default
    with _default_lock:
        _default = logger


def get_logger() -> Logger:
    """Default logger, created from environment settings on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Logger(Handler.from_env())
    return _default
