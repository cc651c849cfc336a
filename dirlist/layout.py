"""Lay rendered entries out as aligned rows, one per line, or tiled columns."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .ansi import display_width, pad_left, pad_right
from .formatting import format_size
from .options import ListingOptions
from .render import DetailEntry, RenderedEntry, TiledEntry

COLUMN_GAP = 2


@dataclass(frozen=True)
class FormattedListing:
    """Laid-out text for one group of entries plus its size total."""

    total_size: str
    text: str


def align_rows(rows: Sequence[Sequence[str]]) -> str:
    """Align detail rows into columns.

    Every field but the last is right-aligned to the widest value in its
    column and followed by one space. The last field (the name) is emitted
    as is.
    """
    widths: dict[int, int] = {}
    for row in rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths.get(idx, 0), display_width(value))

    lines: list[str] = []
    for row in rows:
        parts = [pad_left(value, widths[idx]) + " " for idx, value in enumerate(row[:-1])]
        if row:
            parts.append(row[-1])
        lines.append("".join(parts))
    return "\n".join(lines)


def tile_columns(cells: Sequence[str], width: int, by_lines: bool = False) -> str:
    """Pack ``cells`` into a grid no wider than ``width`` columns.

    Each cell is padded to the widest visible cell plus a two-space gap; the
    last cell on a line is not padded, so a line may use the full ``width``.
    Cells fill down each column, or across each line when ``by_lines`` is
    set. At least one column is always used.
    """
    if not cells:
        return ""
    max_width = max(display_width(cell) for cell in cells)
    cell_width = max_width + COLUMN_GAP
    # The last cell on a line is unpadded, so it only needs max_width columns.
    columns = max(1, (width - max_width) // cell_width + 1) if width >= max_width else 1
    if by_lines:
        grid = [list(cells[start : start + columns]) for start in range(0, len(cells), columns)]
    else:
        rows = math.ceil(len(cells) / columns)
        grid = [list(cells[row::rows]) for row in range(rows)]

    lines: list[str] = []
    for line_cells in grid:
        padded = [pad_right(cell, cell_width) for cell in line_cells[:-1]]
        padded.append(line_cells[-1])
        lines.append("".join(padded))
    return "\n".join(lines)


def format_entries(entries: Sequence[RenderedEntry], total_size: int, options: ListingOptions) -> FormattedListing:
    """Lay out one homogeneous list of rendered entries.

    ``total_size`` is the byte sum of every raw entry considered, including
    ones the inclusion policy hid.
    """
    total = format_size(total_size, options.human_readable)
    if entries and isinstance(entries[0], DetailEntry):
        text = align_rows([entry.fields for entry in entries if isinstance(entry, DetailEntry)])
    else:
        cells = [entry.text for entry in entries if isinstance(entry, TiledEntry)]
        if options.one_column:
            text = "\n".join(cells)
        else:
            text = tile_columns(cells, options.tile_width, by_lines=options.by_lines)
    return FormattedListing(total_size=total, text=text)


__all__ = [
    "COLUMN_GAP",
    "FormattedListing",
    "align_rows",
    "tile_columns",
    "format_entries",
]
