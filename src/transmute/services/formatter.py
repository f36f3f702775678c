"""Bracket-depth re-indentation.

This is not a language-aware formatter: it strips each line and re-indents
it by counting opening and closing brackets at line boundaries. Syntax is
never validated.
"""

from __future__ import annotations

import re

DEFAULT_STYLE_GUIDE = "Standard"
DEFAULT_INDENT = 2

INDENT_WIDTHS = {
    "pep8": 4,
    "black": 4,
    "psr-12": 4,
    "standard": 2,
    "airbnb": 2,
    "google": 2,
    "prettier": 2,
}

_CLOSES_BLOCK = re.compile(r"^[}\])]")
_OPENS_BLOCK = re.compile(r"[({\[]$")


def indent_width(style_guide: str | None) -> int:
    if not style_guide:
        return DEFAULT_INDENT
    return INDENT_WIDTHS.get(style_guide.strip().lower(), DEFAULT_INDENT)


class CodeFormatter:
    """Re-indents code; running it on its own output is a no-op."""

    def format(self, code: str, lang: str, style_guide: str = DEFAULT_STYLE_GUIDE) -> str:
        unit = " " * indent_width(style_guide)
        level = 0
        formatted = []
        for raw in code.split("\n"):
            line = raw.strip()
            if _CLOSES_BLOCK.match(line):
                level = max(0, level - 1)
            formatted.append(unit * level + line if line else "")
            if _OPENS_BLOCK.search(line):
                level += 1
        return "\n".join(formatted)
