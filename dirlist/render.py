"""Turn filtered entries into display cells or detail-row fields.

A rendered entry is a tagged value: ``TiledEntry`` holds one styled name for
column/one-per-line layouts, ``DetailEntry`` holds the ordered fields of a long
listing row. Layout code dispatches on the type, never on the options.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .colors import apply_fallback_color, color_by_file_type
from .formatting import format_permissions, format_size, format_timestamp
from .fs import RawEntry
from .options import ListingOptions
from .theme import PLAIN_THEME, ListingTheme


@dataclass(frozen=True)
class TiledEntry:
    """One styled name cell."""

    text: str


@dataclass(frozen=True)
class DetailEntry:
    """One long-listing row: ``[inode] mode links owner group size mtime name``."""

    fields: tuple[str, ...]


RenderedEntry = TiledEntry | DetailEntry


@dataclass(frozen=True)
class RenderContext:
    """Everything rendering needs besides the entry itself."""

    options: ListingOptions
    target_path: str = "."
    theme: ListingTheme = PLAIN_THEME
    color_rules: Mapping[str, str] = field(default_factory=dict)
    now: float | None = None


def render_name(entry: RawEntry, context: RenderContext) -> str:
    """Apply the name transformations in their fixed order.

    Classify suffix, ``-d`` path substitution, suffix coloring, file-type
    fallback coloring, quoting, and finally the directory color, which wraps
    everything else.
    """
    options = context.options
    theme = context.theme
    metadata = entry.metadata
    name = entry.name

    if options.classify and metadata.is_directory:
        name = f"{name}/"
    if options.directory and entry.name == ".":
        name = context.target_path
    if metadata.is_file:
        name = color_by_file_type(name, metadata, context.color_rules, theme)
    name = apply_fallback_color(name, metadata, theme)
    if options.quote_name:
        name = f'"{name}"'
    if metadata.is_directory:
        name = theme.paint(theme.directory, name)
    return name


def render_entry(entry: RawEntry, context: RenderContext) -> RenderedEntry:
    """Render ``entry`` in the shape the active options call for."""
    options = context.options
    metadata = entry.metadata
    name = render_name(entry, context)
    if not options.detail_mode:
        return TiledEntry(text=name)

    type_char = "d" if metadata.is_directory else "-"
    fields = [
        type_char + format_permissions(metadata.mode),
        str(metadata.link_count),
        str(metadata.owner_id),
        str(metadata.group_id),
        format_size(metadata.size, options.human_readable),
        format_timestamp(metadata.modified_time, context.now),
        name,
    ]
    if options.inode:
        fields.insert(0, str(metadata.inode))
    return DetailEntry(fields=tuple(fields))


def render_entries(entries: Iterable[RawEntry], context: RenderContext) -> list[RenderedEntry]:
    return [render_entry(entry, context) for entry in entries]


__all__ = [
    "TiledEntry",
    "DetailEntry",
    "RenderedEntry",
    "RenderContext",
    "render_name",
    "render_entry",
    "render_entries",
]
