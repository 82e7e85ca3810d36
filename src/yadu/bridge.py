"""Route standard-library ``logging`` records through a yadu handler.

Example:
    >>> import logging
    >>> from yadu.bridge import YaduLogHandler
    >>> logging.getLogger().addHandler(YaduLogHandler(Handler.create(level="debug")))
    >>> logging.getLogger("db").warning("slow query", extra={"ms": 812, "table": "users"})
"""

from __future__ import annotations

import logging
from datetime import datetime

from .core.attr import Attr
from .core.record import Record, Source
from .handler import Handler

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}

EXCEPTION_KEY = "exception"


class YaduLogHandler(logging.Handler):
    """``logging.Handler`` that renders records with a yadu :class:`~yadu.handler.Handler`."""
    
    def __init__(self, handler: Handler | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.handler = handler or Handler.create()
    
    def emit(self, record: logging.LogRecord) -> None:
        if not self.handler.enabled(record.levelno):
            return
        try:
            self.handler.handle(self.to_record(record))
        except Exception:
            self.handleError(record)
    
    def to_record(self, record: logging.LogRecord) -> Record:
        attrs = [Attr(k, v) for k, v in vars(record).items() if k not in _RESERVED and not k.startswith("_")]
        if record.exc_info and record.exc_info[0] is not None:
            attrs.append(Attr(EXCEPTION_KEY, logging.Formatter().formatException(record.exc_info)))
        elif record.exc_text:
            attrs.append(Attr(EXCEPTION_KEY, record.exc_text))
        return Record(
            level=record.levelno,
            message=record.getMessage(),
            time=datetime.fromtimestamp(record.created).astimezone(),
            attrs=tuple(attrs),
            source=Source(record.pathname, record.lineno, record.funcName),
        )
