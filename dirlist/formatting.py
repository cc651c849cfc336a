"""Field formatters for detail rows: permissions, sizes, and timestamps."""

from __future__ import annotations

import stat
import time

_SIZE_SUFFIXES = ("K", "M", "G", "T", "P", "E")
_RECENT_FORMAT = "%b {day} %H:%M"
_OLD_FORMAT = "%b {day}  %Y"


def format_permissions(mode: int) -> str:
    """Return the nine-character ``rwx`` permission string for ``mode``.

    Set-id and sticky bits show up as ``s``/``S`` and ``t``/``T`` in the usual
    positions.
    """
    return stat.filemode(mode)[1:]


def format_size(size: int, human_readable: bool = False) -> str:
    """Format a byte count.

    Plain mode returns the decimal byte count. Human-readable mode uses
    powers of 1024 with one decimal place, dropping a trailing ``.0``:
    ``512``, ``1.5K``, ``4K``, ``12.3M``.
    """
    if not human_readable or size < 1024:
        return str(size)
    value = float(size)
    for suffix in _SIZE_SUFFIXES:
        value /= 1024.0
        if round(value, 1) < 1024:
            break
    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}{suffix}"


def format_timestamp(modified_time: float, now: float | None = None) -> str:
    """Format a modification time the way long listings show it.

    Timestamps from the current year show the clock time; older or future
    years show the year instead. The day of month is space-padded to two
    columns so rows stay aligned.
    """
    local = time.localtime(modified_time)
    current_year = time.localtime(time.time() if now is None else now).tm_year
    day = f"{local.tm_mday:>2}"
    pattern = _RECENT_FORMAT if local.tm_year == current_year else _OLD_FORMAT
    return time.strftime(pattern.format(day=day), local)


__all__ = [
    "format_permissions",
    "format_size",
    "format_timestamp",
]
