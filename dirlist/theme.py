"""Listing color palettes and selection helpers.

Palettes are built from Pygments' console escape table so every color the
listing emits is a plain SGR sequence. The plain palette carries empty codes
and is used whenever color output is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the entry renderer."""

    name: str
    reset: str
    directory: str
    executable: str
    symlink: str
    device: str
    socket: str

    @property
    def enabled(self) -> bool:
        return bool(self.reset)

    def paint(self, code: str, text: str) -> str:
        """Wrap ``text`` in ``code`` and a reset, or return it untouched."""
        if not code:
            return text
        return f"{code}{text}{self.reset}"

    def reset_around(self, text: str) -> str:
        """Fence ``text`` with resets so its style cannot bleed into neighbors."""
        if not self.reset:
            return text
        return f"{self.reset}{text}{self.reset}"


DEFAULT_THEME = ListingTheme(
    name="default",
    reset=codes["reset"],
    directory=codes["bold"] + codes["blue"],
    executable=codes["green"],
    symlink=codes["cyan"],
    device=codes["yellow"],
    socket=codes["magenta"],
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    directory="",
    executable="",
    symlink="",
    device="",
    socket="",
)


def normalize_color_mode(mode: str | None) -> str:
    """Return a valid color mode, falling back to ``auto``."""
    if not mode:
        return "auto"
    candidate = str(mode).strip().lower()
    return candidate if candidate in COLOR_MODES else "auto"


def resolve_theme(color_mode: str | None, *, is_tty: bool) -> ListingTheme:
    """Return the concrete palette for ``color_mode`` and the output stream."""
    mode = normalize_color_mode(color_mode)
    if mode == "never":
        return PLAIN_THEME
    if mode == "auto" and not is_tty:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "COLOR_MODES",
    "ListingTheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "normalize_color_mode",
    "resolve_theme",
]
