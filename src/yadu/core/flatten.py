"""Attribute flattening: resolve values and groups into a plain nested mapping.

The group path is threaded through the recursion as an immutable tuple, so
one handler can flatten records from many threads at once without any
shared, mutated state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from .attr import Attr, Group, resolve

ReplaceHook = Callable[[tuple[str, ...], Attr], Attr | None]
AttrMap = dict[str, Any]


def flatten(attrs: Iterable[Attr], groups: tuple[str, ...] = (), replace: ReplaceHook | None = None) -> AttrMap:
    """Flatten attributes into a mapping of key to value or nested mapping.
    
    - Groups without children are dropped.
    - Named groups nest their children under the group key.
    - Inlined groups (empty key) merge their children into the current level.
    - Every other attribute goes through ``replace`` (if set), which may
      rewrite it or drop it by returning None or ``EMPTY_ATTR``.
    
    Duplicate keys at one level: the last one wins.
    """
    out: AttrMap = {}
    for a in attrs:
        value = resolve(a.value)
        if isinstance(value, Group):
            if not value.attrs:
                continue
            if a.key:
                out[a.key] = flatten(value.attrs, (*groups, a.key), replace)
            else:
                out.update(flatten(value.attrs, groups, replace))
            continue
        
        a = Attr(a.key, value)
        if replace is not None:
            if (a := replace(groups, a)) is None or a.is_empty():
                continue
            value = resolve(a.value)
        out[a.key] = value
    return out


def merge(base: Mapping[str, Any], update: Mapping[str, Any]) -> AttrMap:
    """Merge ``update`` over ``base`` into a new mapping; nested mappings merge recursively."""
    out: AttrMap = dict(base)
    for key, value in update.items():
        prev = out.get(key)
        if isinstance(prev, Mapping) and isinstance(value, Mapping):
            out[key] = merge(prev, value)
        else:
            out[key] = value
    return out
