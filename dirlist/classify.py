"""Split command-line path arguments into files and directories."""

from __future__ import annotations

import glob
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import PathError, path_error_from_exception
from .fs import Metadata, stat_path

logger = logging.getLogger(__name__)

DEFAULT_PATHS = (".",)
_GLOB_CHARS = frozenset("*?[")


@dataclass(frozen=True)
class FileArgument:
    """A path argument that names a regular file."""

    path: str
    metadata: Metadata


@dataclass(frozen=True)
class ClassifiedPaths:
    """Sorted file and directory arguments plus per-path probe failures."""

    files: tuple[FileArgument, ...] = ()
    dirs: tuple[str, ...] = ()
    errors: tuple[PathError, ...] = ()


def expand_paths(paths: Sequence[str]) -> list[str]:
    """Expand shell-style wildcards in ``paths``.

    Patterns with no match are kept verbatim so they surface as missing paths.
    Matches for one pattern are sorted; argument order is otherwise kept.
    """
    expanded: list[str] = []
    for path in paths:
        if not _GLOB_CHARS.intersection(path):
            expanded.append(path)
            continue
        matches = sorted(glob.glob(path))
        expanded.extend(matches if matches else [path])
    return expanded


def classify_paths(paths: Sequence[str] | None) -> ClassifiedPaths:
    """Probe each path and route it to the file or directory list.

    An empty or missing argument list means the current directory. Paths that
    are neither directories nor regular files are dropped. A failed probe is
    recorded and the remaining paths are still processed.
    """
    candidates = expand_paths(list(paths) if paths else list(DEFAULT_PATHS))
    files: list[FileArgument] = []
    dirs: list[str] = []
    errors: list[PathError] = []
    for path in candidates:
        try:
            metadata = stat_path(path)
        except OSError as exc:
            errors.append(path_error_from_exception(path, exc))
            continue
        if metadata.is_directory:
            dirs.append(path)
        elif metadata.is_file:
            files.append(FileArgument(path=path, metadata=metadata))
        else:
            logger.debug("skipping special file argument %s", path)
    files.sort(key=lambda item: item.path)
    dirs.sort()
    return ClassifiedPaths(files=tuple(files), dirs=tuple(dirs), errors=tuple(errors))


__all__ = [
    "DEFAULT_PATHS",
    "FileArgument",
    "ClassifiedPaths",
    "expand_paths",
    "classify_paths",
]
