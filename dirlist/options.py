"""Immutable per-invocation listing options."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TILE_WIDTH = 10_000


@dataclass(frozen=True)
class ListingOptions:
    """Display switches for one listing run.

    Field names follow the long option names; single-letter flags without a
    long form use descriptive names (``long`` for ``-l``, ``sort_by_size`` for
    ``-S`` and so on).
    """

    all: bool = False
    almost_all: bool = False
    directory: bool = False
    classify: bool = False
    human_readable: bool = False
    inode: bool = False
    long: bool = False
    quote_name: bool = False
    reverse: bool = False
    recursive: bool = False
    sort_by_size: bool = False
    sort_by_time: bool = False
    no_sort: bool = False
    width: int | None = None
    one_column: bool = False
    by_lines: bool = False
    # Size that directories reporting 0 bytes sort as under -S; None keeps 0.
    directory_size_floor: int | None = None

    @property
    def detail_mode(self) -> bool:
        """Whether entries render as multi-field rows."""
        return self.long and not self.by_lines

    @property
    def tile_width(self) -> int:
        return self.width if self.width else DEFAULT_TILE_WIDTH


__all__ = [
    "DEFAULT_TILE_WIDTH",
    "ListingOptions",
]
