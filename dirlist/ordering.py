"""Entry ordering and hidden-file inclusion rules.

Sorting picks exactly one key: size (largest first), modification time
(newest first), or the default name key. ``no_sort`` keeps enumeration order.
Python's sort is stable, so entries that tie on the chosen key keep their
enumeration order. Reversal applies last, to whichever order was produced.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .fs import RawEntry
from .options import ListingOptions

# ASCII word characters survive, matching the classic ``\W`` stripping.
_NON_WORD_RE = re.compile(r"\W", re.ASCII)


def name_sort_key(name: str) -> str:
    """Case-folded name with every non-word character removed."""
    return _NON_WORD_RE.sub("", name.strip().lower())


def sort_size(entry: RawEntry, directory_size_floor: int | None = None) -> int:
    """Size used for ``-S`` ordering.

    Some hosts report directories as 0 bytes; when a floor is configured such
    directories sort as if they had that size. The entry itself is untouched.
    """
    size = entry.metadata.size
    if directory_size_floor is not None and size == 0 and entry.metadata.is_directory:
        return directory_size_floor
    return size


def sort_entries(entries: Sequence[RawEntry], options: ListingOptions) -> list[RawEntry]:
    """Return ``entries`` in display order for ``options``."""
    ordered = list(entries)
    if not options.no_sort:
        if options.sort_by_size:
            floor = options.directory_size_floor
            ordered.sort(key=lambda entry: sort_size(entry, floor), reverse=True)
        elif options.sort_by_time:
            ordered.sort(key=lambda entry: entry.metadata.modified_time, reverse=True)
        else:
            ordered.sort(key=lambda entry: name_sort_key(entry.name))
    if options.reverse:
        ordered.reverse()
    return ordered


def is_included(entry: RawEntry, options: ListingOptions) -> bool:
    """Apply the hidden-file policy to one entry.

    ``-d`` keeps only the ``.`` entry. Otherwise undotted names always show,
    ``-a`` shows every dotted name, and ``-A`` shows dotted names except the
    implied ``.`` and ``..``.
    """
    if options.directory:
        return entry.name == "."
    if not entry.dotted:
        return True
    if options.all:
        return True
    return options.almost_all and not entry.implied


def filter_entries(entries: Iterable[RawEntry], options: ListingOptions) -> list[RawEntry]:
    return [entry for entry in entries if is_included(entry, options)]


__all__ = [
    "name_sort_key",
    "sort_size",
    "sort_entries",
    "is_included",
    "filter_entries",
]
