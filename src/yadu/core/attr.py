"""Attributes, groups and lazily computed values.

An :class:`Attr` is a key/value pair attached to a log event or bound to a
handler. Its value is either a plain object, a :class:`Group` of child
attributes, a :class:`Lazy` computation, or an object implementing
:class:`LogValuer` that supplies its own loggable view.

Example:
    >>> from yadu.core.attr import Attr, Lazy, group
    >>> group("request", Attr("method", "GET"), status=200)
    Attr(key='request', value=Group(attrs=(Attr(key='method', value='GET'), Attr(key='status', value=200))))
    >>> resolve(Lazy(lambda: 42))
    42
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

TIME_KEY = "time"
LEVEL_KEY = "level"
MESSAGE_KEY = "msg"
SOURCE_KEY = "source"

# Key used for a value passed without a key, e.g. attrs_from("a", 1, "dangling")
BAD_KEY = "!BADKEY"

_MAX_LOG_VALUES = 100


@dataclass(frozen=True, slots=True)
class Attr:
    """Key/value pair. ``Attr("", None)`` is the drop sentinel."""
    
    key: str
    value: Any = None
    
    def is_empty(self) -> bool:
        return self.key == "" and self.value is None


EMPTY_ATTR = Attr("")


@dataclass(frozen=True, slots=True)
class Group:
    """Group value: nests its attributes under the owning Attr's key, or inlines them when the key is empty."""
    
    attrs: tuple[Attr, ...] = ()
    
    def __len__(self) -> int:
        return len(self.attrs)


class Lazy:
    """Deferred value, computed only when a record is actually rendered.
    
    Example:
        >>> log.debug("state", dump=Lazy(expensive_dump))  # not called if DEBUG is disabled
    """
    
    __slots__ = ("_fn",)
    
    def __init__(self, fn: Callable[[], Any]) -> None:
        self._fn = fn
    
    def __call__(self) -> Any:
        return self._fn()
    
    def __repr__(self) -> str:
        return f"Lazy({self._fn!r})"


@runtime_checkable
class LogValuer(Protocol):
    """Objects that expose a loggable view of themselves instead of being introspected."""
    
    def log_value(self) -> Any: ...


def resolve(value: Any) -> Any:
    """Resolve a possibly lazy value to its concrete form.
    
    Invokes a Lazy once, then follows ``log_value()`` views until a plain value
    remains. A view chain that never settles is cut off and replaced by an
    error string.
    """
    for _ in range(_MAX_LOG_VALUES):
        match value:
            case Lazy():
                value = value()
            case LogValuer() if not isinstance(value, type):
                value = value.log_value()
            case _:
                return value
    return f"!ERROR: log_value called too many times on type {type(value).__name__}"


def group(key: str, *args: Any, **kw: Any) -> Attr:
    """Build a group attribute. Accepts the same arguments as :func:`attrs_from`."""
    return Attr(key, Group(attrs_from(*args, **kw)))


def attrs_from(*args: Any, **kw: Any) -> tuple[Attr, ...]:
    """Collect attributes from Attr objects, ``key, value`` pairs and keywords.
    
    >>> attrs_from("spawn", 199, Attr("alive", True), players=2)
    (Attr(key='spawn', value=199), Attr(key='alive', value=True), Attr(key='players', value=2))
    """
    out: list[Attr] = []
    it = iter(args)
    for arg in it:
        match arg:
            case Attr():
                out.append(arg)
            case str():
                try:
                    out.append(Attr(arg, next(it)))
                except StopIteration:
                    out.append(Attr(BAD_KEY, arg))
            case _:
                out.append(Attr(BAD_KEY, arg))
    out.extend(Attr(k, v) for k, v in kw.items())
    return tuple(out)
