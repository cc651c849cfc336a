"""Filesystem probing, directory enumeration and recursive traversal.

These are the only functions in the package that touch the filesystem. Each
object is stat'ed exactly once; callers receive immutable ``Metadata`` values.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from .types import Metadata, RawEntry

logger = logging.getLogger(__name__)


def stat_path(path: str, follow_symlinks: bool = True) -> Metadata:
    """Return metadata for ``path``.

    Raises ``OSError`` (``FileNotFoundError`` for missing paths) unchanged so
    the caller decides how the failure is reported.
    """
    logger.debug("stat %s", path)
    return Metadata.from_stat(os.stat(path, follow_symlinks=follow_symlinks))


def parent_path(path: str) -> str:
    """Return the parent directory of ``path`` as seen by ``..`` inside it."""
    return os.path.join(path, os.pardir)


def list_children(directory: str) -> tuple[list[RawEntry], list[tuple[str, OSError]]]:
    """List one level of ``directory`` in enumeration order.

    Returns ``(children, errors)``. Children are stat'ed without following
    symlinks so links stay recognizable. A child that vanishes or cannot be
    stat'ed is skipped and recorded in ``errors``; when the directory itself
    cannot be scanned the child list is empty and the scan error is the only
    error returned.
    """
    logger.debug("scandir %s", directory)
    children: list[RawEntry] = []
    errors: list[tuple[str, OSError]] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    metadata = Metadata.from_stat(child.stat(follow_symlinks=False))
                except OSError as exc:
                    errors.append((child.path, exc))
                    continue
                children.append(RawEntry(name=child.name, metadata=metadata))
    except OSError as exc:
        return [], [(directory, exc)]
    return children, errors


def _subdirectory_names(directory: str, include_hidden: bool) -> list[str]:
    """Return sorted names of real (non-symlink) subdirectories of ``directory``.

    Dotted names are skipped unless ``include_hidden`` is set.
    """
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                if not include_hidden and child.name.startswith("."):
                    continue
                try:
                    if child.is_dir(follow_symlinks=False):
                        names.append(child.name)
                except OSError:
                    continue
    except OSError:
        return []
    names.sort()
    return names


def walk_directories(root: str, include_hidden: bool = False) -> Iterator[str]:
    """Yield ``root`` and every directory below it, depth-first.

    The sequence is lazy: subdirectories of a directory are only scanned once
    the consumer has pulled that directory. Symlinked directories are not
    followed, which keeps the walk finite. Dotted subdirectories are only
    entered when ``include_hidden`` is set; ``root`` itself is always yielded.
    """
    stack = [root]
    while stack:
        directory = stack.pop()
        logger.debug("recurse %s", directory)
        yield directory
        names = _subdirectory_names(directory, include_hidden)
        for name in reversed(names):
            stack.append(os.path.join(directory, name))


__all__ = [
    "stat_path",
    "parent_path",
    "list_children",
    "walk_directories",
]
