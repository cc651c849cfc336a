"""Name coloring policy: LS_COLORS suffix rules plus file-type fallbacks.

Suffix rules only apply to regular files. Names left uncolored by the suffix
rules go through ``FALLBACK_RULES``, an ordered first-match-wins list keyed on
file type. Everything here is a pure function of ``(name, metadata, theme)``.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Mapping

from .ansi import is_styled
from .fs.types import Metadata
from .theme import ListingTheme

_ARCHIVE = "01;31"
_IMAGE = "01;35"
_AUDIO = "00;36"

DEFAULT_LS_COLORS = ":".join(
    [f"*.{ext}={_ARCHIVE}" for ext in ("tar", "tgz", "gz", "bz2", "xz", "zst", "zip", "7z", "rar", "jar", "deb", "rpm")]
    + [f"*.{ext}={_IMAGE}" for ext in ("jpg", "jpeg", "gif", "png", "bmp", "svg", "tif", "tiff", "webp", "mp4", "mkv", "mov", "avi", "webm")]
    + [f"*.{ext}={_AUDIO}" for ext in ("mp3", "flac", "ogg", "wav", "m4a", "opus")]
)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def parse_ls_colors(text: str | None) -> dict[str, str]:
    """Parse ``LS_COLORS`` syntax into a ``{suffix: sgr}`` mapping.

    Only ``*suffix=SGR`` entries are kept; two-letter type keys (``di``,
    ``ln``, ...) are ignored because file types use the fallback palette.
    Malformed entries are skipped.
    """
    rules: dict[str, str] = {}
    if not text:
        return rules
    for item in text.split(":"):
        key, sep, value = item.partition("=")
        if not sep or not key.startswith("*") or len(key) < 2:
            continue
        value = value.strip()
        if not value or any(ch not in "0123456789;" for ch in value):
            continue
        rules[key[1:]] = value
    return rules


def resolve_ls_colors(environ: Mapping[str, str] | None = None, configured: str | None = None) -> dict[str, str]:
    """Pick suffix rules from the environment, then config, then the built-in map."""
    env = os.environ if environ is None else environ
    for source in (env.get("LS_COLORS"), configured, DEFAULT_LS_COLORS):
        if source:
            return parse_ls_colors(source)
    return {}


def _suffix_sgr(name: str, rules: Mapping[str, str]) -> str | None:
    best: str | None = None
    best_len = 0
    for suffix, sgr in rules.items():
        if len(suffix) > best_len and name.endswith(suffix):
            best = sgr
            best_len = len(suffix)
    return best


def color_by_file_type(name: str, metadata: Metadata, rules: Mapping[str, str], theme: ListingTheme) -> str:
    """Color ``name`` by its suffix when it is a regular file with a matching rule."""
    if not theme.enabled or not metadata.is_file:
        return name
    sgr = _suffix_sgr(name, rules)
    if sgr is None:
        return name
    return f"\x1b[{sgr}m{name}{theme.reset}"


FallbackRule = tuple[Callable[[Metadata], bool], Callable[[ListingTheme], str]]

FALLBACK_RULES: tuple[FallbackRule, ...] = (
    (lambda meta: meta.is_file and bool(meta.mode & _EXECUTE_BITS), lambda theme: theme.executable),
    (lambda meta: meta.is_symlink, lambda theme: theme.symlink),
    (lambda meta: meta.is_char_device or meta.is_block_device, lambda theme: theme.device),
    (lambda meta: meta.is_socket, lambda theme: theme.socket),
)


def apply_fallback_color(name: str, metadata: Metadata, theme: ListingTheme) -> str:
    """Color a not-yet-styled name by file type, then fence it with resets.

    Names that already carry a style are returned unchanged.
    """
    if is_styled(name):
        return name
    for matches, code_for in FALLBACK_RULES:
        if matches(metadata):
            name = theme.paint(code_for(theme), name)
            break
    return theme.reset_around(name)


__all__ = [
    "DEFAULT_LS_COLORS",
    "parse_ls_colors",
    "resolve_ls_colors",
    "color_by_file_type",
    "FALLBACK_RULES",
    "apply_fallback_color",
]
