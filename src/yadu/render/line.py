"""Assembly of one output line from a record and the handler state.

Layout::

    [time ]LEVEL: message [source ]
        bound: attrs
        event: attrs
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..core.attr import TIME_KEY, Attr
from ..core.flatten import flatten
from ..core.levels import level_name, tier
from ..core.record import Record
from ..foundation.config import Options
from .colors import MESSAGE_COLOR, TREE_COLOR, colorize, tier_color
from .postprocess import postprocess
from .serializer import serialize


def render_tree(mapping: Mapping[str, Any]) -> str:
    """Serialize and indent an attribute mapping; empty mappings render as nothing."""
    return postprocess(serialize(mapping)) if mapping else ""


def format_time(ts: datetime | None, options: Options) -> str:
    """Timestamp text, or "" for the zero time or when the replace hook drops the time key."""
    if ts is None:
        return ""
    if options.replace_attr is not None:
        a = options.replace_attr((), Attr(TIME_KEY, ts))
        if a is None or a.is_empty():
            return ""
    return ts.strftime(options.time_format).rstrip()


def render_line(
    record: Record,
    options: Options,
    *,
    groups: tuple[str, ...] = (),
    bound: Mapping[str, Any] | None = None,
) -> str:
    """Render a record to a newline-terminated line.
    
    Raises:
        SerializationError: bound or event attributes could not be serialized
    """
    colors = options.colors
    level = colorize(f"{level_name(record.level)}:", tier_color(tier(record.level)), colors)
    fields = flatten(record.attrs, groups, options.replace_attr)
    source = str(record.source) if options.add_source and record.source is not None else ""
    tree = render_tree(bound or {}) + render_tree(fields)
    
    time = format_time(record.time, options)
    head = f"{time} " if time else ""
    head += f"{level} {colorize(record.message, MESSAGE_COLOR, colors)} "
    if source:
        head += f"{source} "
    return head + (colorize(tree, TREE_COLOR, colors) if tree else "") + "\n"
