"""Log records as handed to a handler by the logging facade."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .attr import Attr


@dataclass(frozen=True, slots=True)
class Source:
    """Call site of a log statement."""
    
    file: str
    line: int
    function: str = ""
    
    def __str__(self) -> str:
        return f"{self.file}: {self.line}"


@dataclass(frozen=True, slots=True)
class Record:
    """One log event. Built per call, rendered once, then discarded.
    
    ``time=None`` is the zero timestamp: the rendered line carries no time.
    """
    
    level: int
    message: str
    time: datetime | None = None
    attrs: tuple[Attr, ...] = ()
    source: Source | None = None
