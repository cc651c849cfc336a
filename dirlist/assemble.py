"""Build the raw entry list for one directory or for bare file arguments."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from .classify import FileArgument
from .errors import PathError, path_error_from_exception
from .fs import RawEntry, list_children, parent_path, stat_path, walk_directories

logger = logging.getLogger(__name__)


def assemble_directory(path: str) -> tuple[list[RawEntry], list[PathError]]:
    """Return ``.``, ``..`` and every child of ``path`` in enumeration order.

    The implied entries carry the metadata of ``path`` and of its parent.
    Failures are returned as errors alongside whatever entries could be read.
    """
    errors: list[PathError] = []
    entries: list[RawEntry] = []
    try:
        entries.append(RawEntry(name=".", metadata=stat_path(path)))
        entries.append(RawEntry(name="..", metadata=stat_path(parent_path(path))))
    except OSError as exc:
        return [], [path_error_from_exception(path, exc)]

    children, scan_errors = list_children(path)
    entries.extend(children)
    for failed_path, exc in scan_errors:
        action = "open directory" if failed_path == path else "access"
        errors.append(path_error_from_exception(failed_path, exc, action))
    logger.debug("assembled %d entries for %s", len(entries), path)
    return entries, errors


def display_name(path: str) -> str:
    """Return the last component of ``path``, ignoring trailing separators."""
    trimmed = path.rstrip("/" + os.sep) or path
    return os.path.basename(trimmed) or trimmed


def assemble_files(files: Iterable[FileArgument]) -> list[RawEntry]:
    """Turn file arguments into entries named by their last path component."""
    return [RawEntry(name=display_name(item.path), metadata=item.metadata) for item in files]


def iter_directory_targets(dirs: Iterable[str], recursive: bool, include_hidden: bool = False) -> Iterator[str]:
    """Yield the directories to list, expanding each depth-first when recursive.

    Recursion skips dotted subdirectories unless ``include_hidden`` is set,
    matching the entries the parent listing shows.
    """
    for directory in dirs:
        if recursive:
            yield from walk_directories(directory, include_hidden)
        else:
            yield directory


__all__ = [
    "assemble_directory",
    "assemble_files",
    "display_name",
    "iter_directory_targets",
]
