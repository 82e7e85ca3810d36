"""Attribute tree to YAML text.

Values are first reduced to plain data (mappings, lists, scalars) by field
introspection, then emitted with PyYAML's SafeDumper. Keys are sorted so
output is deterministic.

Introspection rules:
- pydantic models: ``model_dump()``; fields declared with ``exclude=True`` are hidden
- dataclasses: their fields, minus ``_private`` ones and those with ``metadata={"log": False}``
- exceptions: their message; classes: their qualified name
- paths, UUIDs, decimals, dates and times: their text form
- other objects with a ``__dict__``: their public attributes
- nested values are not asked for their ``log_value()`` view; only attribute
  values themselves are resolved
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any
from uuid import UUID

import yaml
from pydantic import BaseModel

from ..core.attr import Group
from ..core.flatten import flatten
from ..foundation.errors import SerializationError


def to_plain(value: Any) -> Any:
    """Reduce a value to data the YAML dumper can represent."""
    match value:
        case None | bool():
            return value
        case Enum():
            return to_plain(value.value)
        case str():
            return str(value)
        case int():
            return int(value)
        case float():
            return float(value)
        case PurePath() | UUID() | Decimal() | date() | time():
            return value
        case BaseException():
            return str(value)
        case type():
            return value.__qualname__
        case Group():
            return to_plain(flatten(value.attrs))
        case BaseModel():
            return to_plain(value.model_dump())
        case Mapping():
            return {to_plain(k): to_plain(v) for k, v in value.items()}
        case list() | tuple() | set() | frozenset():
            return [to_plain(v) for v in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)
                if not f.name.startswith("_") and f.metadata.get("log", True)}
    if hasattr(value, "__dict__") and not callable(value):
        return {k: to_plain(v) for k, v in vars(value).items() if not k.startswith("_")}
    return value


class _Dumper(yaml.SafeDumper):
    """SafeDumper that also writes paths, UUIDs, decimals and times as scalars."""


def _represent_text(dumper: yaml.SafeDumper, data: Any) -> yaml.Node:
    return dumper.represent_str(str(data))


def _represent_decimal(dumper: yaml.SafeDumper, data: Decimal) -> yaml.Node:
    # tag the digits as whatever YAML reads them as, so they are written unquoted
    text = str(data)
    return dumper.represent_scalar(dumper.resolve(yaml.ScalarNode, text, (True, False)), text)


_Dumper.add_multi_representer(PurePath, _represent_text)
_Dumper.add_multi_representer(UUID, _represent_text)
_Dumper.add_representer(Decimal, _represent_decimal)
_Dumper.add_representer(time, _represent_text)


def serialize(mapping: Mapping[str, Any]) -> str:
    """Serialize an attribute mapping to block-style YAML.
    
    Raises:
        SerializationError: A value cannot be represented (unsupported type,
            reference cycle, unsortable keys)
    """
    try:
        return yaml.dump(
            to_plain(mapping),
            Dumper=_Dumper,
            sort_keys=True,
            default_flow_style=False,
            allow_unicode=True,
            indent=4,
            width=float("inf"),
        )
    except (yaml.YAMLError, RecursionError, TypeError) as e:
        raise SerializationError.from_exc(e, "cannot serialize attributes") from e


__all__ = ["serialize", "to_plain"]
