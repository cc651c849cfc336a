"""Filesystem collaborators for the listing engine.

This package contains the non-presentation primitives:
- immutable metadata/entry datatypes
- single-path probing and one-level directory enumeration
- lazy depth-first traversal used by recursive listings
"""

from __future__ import annotations

from .types import Metadata, RawEntry
from .scan import list_children, parent_path, stat_path, walk_directories

__all__ = [
    "Metadata",
    "RawEntry",
    "stat_path",
    "parent_path",
    "list_children",
    "walk_directories",
]
