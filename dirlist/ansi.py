"""ANSI-aware text measurement and padding utilities.

Listing cells carry color codes, so alignment has to be computed on the
visible text only. These helpers strip escape sequences before measuring and
pad on the visible width while keeping the styled text intact.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from ``text``."""
    if "\x1b" not in text:
        return text
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies once printed."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def pad_left(text: str, width: int, fill: str = " ") -> str:
    """Right-align ``text`` in ``width`` visible columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return fill * missing + text


def pad_right(text: str, width: int, fill: str = " ") -> str:
    """Left-align ``text`` in ``width`` visible columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + fill * missing


def is_styled(text: str) -> bool:
    """Return whether ``text`` carries at least one escape sequence."""
    return strip_ansi(text) != text


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "strip_ansi",
    "char_display_width",
    "display_width",
    "pad_left",
    "pad_right",
    "is_styled",
]
