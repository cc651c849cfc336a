"""Combine per-directory listings into one output block and an exit status."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import PathError, max_severity


@dataclass(frozen=True)
class DirectoryResult:
    """The finished listing of one directory."""

    path: str
    total_size: str
    text: str


def format_section(result: DirectoryResult, detail_mode: bool, show_name: bool) -> str:
    parts: list[str] = []
    if show_name:
        parts.append(f"{result.path}:\n")
    if detail_mode:
        parts.append(f"total {result.total_size}\n")
    parts.append(result.text)
    return "".join(parts)


def format_sections(results: Sequence[DirectoryResult], detail_mode: bool, show_names: bool) -> str:
    """Join directory listings.

    With ``show_names`` each section starts with ``<path>:`` and sections are
    separated by one blank line. Without it only a single result is shown,
    with no header.
    """
    if show_names:
        return "\n\n".join(format_section(result, detail_mode, True) for result in results)
    if len(results) == 1:
        return format_section(results[0], detail_mode, False)
    return ""


def combine_output(file_text: str, directory_text: str) -> str:
    """Put the bare-file listing before directory sections, blank-line separated."""
    if file_text and directory_text:
        return f"{file_text}\n\n{directory_text}"
    return file_text or directory_text


def exit_status(errors: Iterable[PathError]) -> int:
    """0 when clean, 1 for missing paths only, 2 for any serious failure."""
    return int(max_severity(errors))


__all__ = [
    "DirectoryResult",
    "format_section",
    "format_sections",
    "combine_output",
    "exit_status",
]
