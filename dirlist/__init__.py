"""Public package surface for dirlist.

Exports ``main`` for programmatic CLI invocation and ``list_paths`` for
embedding the listing engine with a custom output sink.
"""

from __future__ import annotations

from .listing import BufferSink, StreamSink, list_paths
from .options import ListingOptions


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "list_paths", "ListingOptions", "BufferSink", "StreamSink"]
