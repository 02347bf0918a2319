"""Brace-depth re-indentation of Verse source text."""

from __future__ import annotations

import re
from typing import List

from ..syntax import COMMENT_MARKER

DEFAULT_INDENT_WIDTH = 4

BRANCH_RE = re.compile(r"^(?:if|else)\b")


def format_source(source: str, *, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """Re-indent *source* by brace nesting depth.

    Only leading and trailing whitespace changes; the line count is preserved
    and whitespace-only lines come out empty. A branch header (``if``,
    ``else if``, ``else``) that does not end with ``{`` indents the lines after
    it, matching brace-less single-line bodies.
    """

    unit = " " * indent_width
    indent_level = 0
    formatted: List[str] = []

    for raw in source.split("\n"):
        line = raw.strip()
        if not line:
            formatted.append("")
            continue
        if line.startswith(COMMENT_MARKER):
            formatted.append(unit * indent_level + line)
            continue

        if line.startswith("}"):
            indent_level = max(0, indent_level - 1)
        formatted.append(unit * indent_level + line)

        if line.endswith("{"):
            indent_level += 1
        elif BRANCH_RE.match(line):
            indent_level += 1

    return "\n".join(formatted)
