"""Top-level listing orchestration.

``list_paths`` drives one invocation: classify arguments, list each target
directory (expanded depth-first under ``-R``), list bare files, aggregate the
sections and report errors. Output goes to an explicit sink so callers and
tests decide where text ends up.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol, TextIO

from .aggregate import DirectoryResult, combine_output, exit_status, format_sections
from .ansi import strip_ansi
from .assemble import assemble_directory, assemble_files, iter_directory_targets
from .classify import classify_paths
from .errors import PathError
from .fs import RawEntry
from .layout import FormattedListing, format_entries
from .options import ListingOptions
from .ordering import filter_entries, sort_entries
from .render import RenderContext, render_entries
from .theme import PLAIN_THEME, ListingTheme

logger = logging.getLogger(__name__)


class ListingSink(Protocol):
    """Destination for listing text and error messages."""

    def out(self, text: str) -> None: ...

    def err(self, text: str) -> None: ...


@dataclass
class StreamSink:
    """Write each message as one newline-terminated block to text streams."""

    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)

    def out(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def err(self, text: str) -> None:
        self.stderr.write(text + "\n")


@dataclass
class BufferSink:
    """Collect messages in memory."""

    stdout: list[str] = field(default_factory=list)
    stderr: list[str] = field(default_factory=list)

    def out(self, text: str) -> None:
        self.stdout.append(text)

    def err(self, text: str) -> None:
        self.stderr.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.stdout)


def list_entries(entries: Sequence[RawEntry], context: RenderContext) -> FormattedListing:
    """Sort, filter, render and lay out one group of raw entries."""
    options = context.options
    total_size = sum(entry.metadata.size for entry in entries)
    visible = filter_entries(sort_entries(entries, options), options)
    return format_entries(render_entries(visible, context), total_size, options)


def list_directory(path: str, context: RenderContext) -> tuple[DirectoryResult | None, list[PathError]]:
    """List one directory; ``None`` when the directory itself cannot be probed."""
    entries, errors = assemble_directory(path)
    if not entries:
        return None, errors
    listing = list_entries(entries, replace(context, target_path=path))
    return DirectoryResult(path=path, total_size=listing.total_size, text=listing.text), errors


def list_paths(
    paths: Sequence[str] | None,
    options: ListingOptions,
    sink: ListingSink,
    *,
    theme: ListingTheme = PLAIN_THEME,
    color_rules: Mapping[str, str] | None = None,
    now: float | None = None,
) -> int:
    """Run one listing and return its exit status.

    Errors are sent to ``sink.err`` as they occur and never stop the remaining
    paths from being listed. The combined listing is sent to ``sink.out`` once,
    and only when it has visible content.
    """
    context = RenderContext(options=options, theme=theme, color_rules=dict(color_rules or {}), now=now)
    classified = classify_paths(paths)
    errors: list[PathError] = []

    def report(new_errors: Sequence[PathError]) -> None:
        for error in new_errors:
            sink.err(error.message)
        errors.extend(new_errors)

    report(classified.errors)

    results: list[DirectoryResult] = []
    include_hidden = options.all or options.almost_all
    for target in iter_directory_targets(classified.dirs, options.recursive, include_hidden):
        result, dir_errors = list_directory(target, context)
        report(dir_errors)
        if result is not None:
            results.append(result)

    file_text = ""
    if classified.files:
        file_text = list_entries(assemble_files(classified.files), context).text

    show_names = len(results) + len(classified.files) > 1
    output = combine_output(file_text, format_sections(results, options.detail_mode, show_names))
    if os.sep == "\\":
        output = output.replace("\\", "/")
    if strip_ansi(output).strip():
        sink.out(output)

    status = exit_status(errors)
    logger.debug("listed %d directories, %d files, status %d", len(results), len(classified.files), status)
    return status


__all__ = [
    "ListingSink",
    "StreamSink",
    "BufferSink",
    "list_entries",
    "list_directory",
    "list_paths",
]
