"""ANSI colors for the level tag, message and attribute block."""

from __future__ import annotations

from ..core.levels import Tier

_COLORS = {"reset": "\033[0m", "red": "\033[31m", "green": "\033[32m", "yellow": "\033[33m",
           "blue": "\033[34m", "magenta": "\033[35m", "cyan": "\033[36m", "white": "\033[37m"}
_TIER_COLORS: dict[Tier, str] = {"debug": "magenta", "info": "blue", "warn": "yellow", "error": "red"}

MESSAGE_COLOR = "cyan"
TREE_COLOR = "white"


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in a color escape and a reset. Returns text unchanged when disabled."""
    return f"{_COLORS[color]}{text}{_COLORS['reset']}" if enabled else text


def tier_color(t: Tier) -> str:
    return _TIER_COLORS[t]
