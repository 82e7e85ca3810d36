"""Rendering: YAML serialization, postprocessing, colors and line assembly."""

from .colors import colorize
from .line import format_time, render_line, render_tree
from .postprocess import INDENT, postprocess
from .serializer import serialize, to_plain

__all__ = ["INDENT", "colorize", "format_time", "postprocess", "render_line", "render_tree", "serialize", "to_plain"]
