"""ANSI-aware text measurement helpers.

Measures display width of styled text so layout math ignores escape codes
and counts East Asian wide characters as two terminal cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the widest line of ``text`` in terminal columns."""
    plain = strip_ansi(text)
    return max((sum(char_display_width(ch) for ch in line) for line in plain.split("\n")), default=0)

