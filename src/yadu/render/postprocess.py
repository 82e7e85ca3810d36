"""Cosmetic fixes applied to serializer output before it is attached to a log line."""

from __future__ import annotations

import re

INDENT = "    "

_LINE_START = re.compile(r"(?m)^")
# Keys YAML 1.1 would read as booleans get quoted by the dumper; values are left alone
_BOOL_KEY = re.compile(r"""(?mi)^([ \t]*(?:-[ \t]+)*)(['"])(y|n|yes|no|true|false|on|off)\2:""")


def postprocess(tree: str) -> str:
    """Indent a serialized tree so it hangs below the log line.
    
    >>> postprocess("'yes': 1\\nb: 'no'\\n")
    "\\n    yes: 1\\n    b: 'no'"
    """
    tree = _BOOL_KEY.sub(r"\1\3:", tree)
    return "\n" + INDENT + _LINE_START.sub(INDENT, tree).strip()
