"""The yadu handler: immutable logger state plus the single write path.

A :class:`Handler` holds the minimum level, output stream, options, group
path and bound attributes. ``with_attrs``/``with_group`` return new handlers
and never touch the receiver. The output stream and its lock are shared by
every handler derived from one root, so lines from any of them never
interleave.

Example:
    >>> h = Handler.create(sys.stdout, level="debug", colors=False)
    >>> h = h.with_attrs(attrs_from(service="api"))
    >>> h.handle(Record(INFO, "started", datetime.now().astimezone(), attrs_from(port=8080)))
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Self, TextIO

from .core.attr import Attr
from .core.flatten import flatten, merge
from .core.record import Record
from .foundation.config import Options, get_settings
from .foundation.errors import WriteError
from .render.line import render_line

_NO_ATTRS: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Handler:
    """Renders records as a log line with an indented YAML attribute tree.
    
    Build roots with :meth:`create`; derive children with :meth:`with_attrs`
    and :meth:`with_group`. Safe for concurrent use from many threads.
    """
    
    output: TextIO
    options: Options = field(default_factory=Options)
    groups: tuple[str, ...] = ()
    attrs: Mapping[str, Any] = field(default_factory=lambda: _NO_ATTRS)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    
    @classmethod
    def create(cls, output: TextIO | None = None, options: Options | None = None, **overrides: Any) -> Self:
        """Create a root handler. Keyword overrides are applied on top of ``options``.
        
        Example:
            >>> Handler.create(level="warn", add_source=True)
        """
        if overrides:
            options = Options(**{**(options.model_dump() if options else {}), **overrides})
        return cls(output=sys.stderr if output is None else output, options=options or Options())
    
    @classmethod
    def from_env(cls, output: TextIO | None = None, **overrides: Any) -> Self:
        """Create a root handler configured from YADU_* environment variables."""
        return cls.create(output, Options.from_settings(get_settings(), **overrides))
    
    @property
    def level(self) -> int:
        return self.options.level
    
    def enabled(self, level: int) -> bool:
        return level >= self.options.level
    
    def with_attrs(self, attrs: Sequence[Attr]) -> Handler:
        """Return a handler that renders ``attrs`` ahead of every record's own attributes.
        
        Attributes are flattened now, against the current group path and
        replace hook. Keys bound later win over keys bound earlier.
        """
        if not attrs:
            return self
        bound = flatten(attrs, self.groups, self.options.replace_attr)
        return replace(self, attrs=MappingProxyType(merge(self.attrs, bound)))
    
    def with_group(self, name: str) -> Handler:
        """Return a handler whose group path is extended by ``name``.
        
        The path is what the replace hook sees for later attributes; it adds no key itself.
        """
        if not name:
            return self
        return replace(self, groups=(*self.groups, name))
    
    def handle(self, record: Record) -> None:
        """Render and write one record. Does not re-check :meth:`enabled`.
        
        Raises:
            SerializationError: attributes could not be serialized; nothing was written
            WriteError: the output stream failed
        """
        line = render_line(record, self.options, groups=self.groups, bound=self.attrs)
        with self.lock:
            try:
                self.output.write(line)
                if (flush := getattr(self.output, "flush", None)) is not None:
                    flush()
            except (OSError, ValueError) as e:
                raise WriteError.from_exc(e, "cannot write log line") from e
