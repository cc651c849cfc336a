"""Persistent JSON config helpers.

Stores listing defaults: color mode, tiling width, suffix color rules and the
directory size used by size sorting. All access is defensive: malformed or
missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

from .theme import COLOR_MODES

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
WINDOWS_DIRECTORY_SIZE = 4096


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Listing itself only reads config; this writer exists for tests and
    tooling that seed defaults. Filesystem errors are ignored; config is a
    convenience, never a reason for a listing to fail.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_color_mode() -> str:
    """Return the configured color mode, ``auto`` when unset or invalid."""
    value = load_config().get("color")
    if isinstance(value, str) and value.strip().lower() in COLOR_MODES:
        return value.strip().lower()
    return "auto"


def load_default_width() -> int | None:
    """Return the configured tiling width.

    Booleans, non-integers and values below 1 are treated as unset.
    """
    value = load_config().get("width")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_ls_colors() -> str | None:
    """Return configured ``LS_COLORS``-syntax rules, used when the env var is unset."""
    value = load_config().get("ls_colors")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def default_directory_size_floor() -> int | None:
    """Directory size assumed by size sorting on hosts that report 0."""
    return WINDOWS_DIRECTORY_SIZE if os.name == "nt" else None


def load_directory_size_floor() -> int | None:
    """Return the size that 0-byte directories sort as under ``-S``.

    An explicit ``null`` in config disables the adjustment; a missing key uses
    the host default.
    """
    data = load_config()
    if "directory_size_floor" not in data:
        return default_directory_size_floor()
    value = data["directory_size_floor"]
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default_directory_size_floor()
    return value


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_color_mode",
    "load_default_width",
    "load_ls_colors",
    "default_directory_size_floor",
    "load_directory_size_floor",
]
