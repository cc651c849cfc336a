"""Command-line front door for dirlist.

Parses ``ls``-style options, merges persisted defaults, and dispatches into
the listing engine with a stream sink on stdout/stderr.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from . import config
from .colors import resolve_ls_colors
from .listing import StreamSink, list_paths
from .options import ListingOptions
from .theme import COLOR_MODES, resolve_theme

DEBUG_ENV = "DIRLIST_DEBUG"

_EPILOG = """\
Sort entries alphabetically if none of -tSU is specified.

Exit status:
  0   if OK,
  1   if minor problems (e.g., cannot access a path argument),
  2   if serious trouble (e.g., cannot read a directory).
"""


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build the ``ls`` option parser.

    ``-h`` means human-readable sizes, so automatic help is replaced by an
    explicit ``--help`` flag.
    """
    parser = argparse.ArgumentParser(
        prog="ls",
        usage="%(prog)s [OPTION]... [FILE]...",
        description="List information about the FILEs (the current directory by default).",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("paths", nargs="*", metavar="FILE", help=argparse.SUPPRESS)
    parser.add_argument("-a", "--all", action="store_true", help="do not ignore entries starting with .")
    parser.add_argument("-A", "--almost-all", action="store_true", help="do not list implied . and ..")
    parser.add_argument(
        "-d",
        "--directory",
        action="store_true",
        help="list directory entries instead of contents",
    )
    parser.add_argument("-F", "--classify", action="store_true", help="append / to directory names")
    parser.add_argument(
        "-h",
        "--human-readable",
        action="store_true",
        help="with -l, print sizes in human readable format (e.g., 1K 234M 2G)",
    )
    parser.add_argument("-i", "--inode", action="store_true", help="print the index number of each file")
    parser.add_argument("-l", dest="long", action="store_true", help="use a long listing format")
    parser.add_argument("-Q", "--quote-name", action="store_true", help="enclose entry names in double quotes")
    parser.add_argument("-r", "--reverse", action="store_true", help="reverse order while sorting")
    parser.add_argument("-R", "--recursive", action="store_true", help="list subdirectories recursively")
    parser.add_argument("-S", dest="sort_by_size", action="store_true", help="sort by file size")
    parser.add_argument(
        "-t",
        dest="sort_by_time",
        action="store_true",
        help="sort by modification time, newest first",
    )
    parser.add_argument(
        "-U",
        dest="no_sort",
        action="store_true",
        help="do not sort; list entries in directory order",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=None,
        metavar="COLS",
        help="assume screen width instead of current value",
    )
    parser.add_argument(
        "-x",
        dest="by_lines",
        action="store_true",
        help="list entries by lines instead of by columns",
    )
    parser.add_argument("-1", dest="one_column", action="store_true", help="list one file per line")
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        metavar="WHEN",
        help=f"colorize the output ({', '.join(COLOR_MODES)})",
    )
    parser.add_argument("--help", action="help", help="display this help and exit")
    return parser


def options_from_args(args: argparse.Namespace) -> ListingOptions:
    """Merge parsed flags with persisted defaults into ``ListingOptions``."""
    return ListingOptions(
        all=args.all,
        almost_all=args.almost_all,
        directory=args.directory,
        classify=args.classify,
        human_readable=args.human_readable,
        inode=args.inode,
        long=args.long,
        quote_name=args.quote_name,
        reverse=args.reverse,
        recursive=args.recursive,
        sort_by_size=args.sort_by_size,
        sort_by_time=args.sort_by_time,
        no_sort=args.no_sort,
        width=args.width if args.width is not None else config.load_default_width(),
        one_column=args.one_column,
        by_lines=args.by_lines,
        directory_size_floor=config.load_directory_size_floor(),
    )


def _configure_logging() -> None:
    if os.environ.get(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run one listing, and return the exit status."""
    args = build_parser().parse_intermixed_args(argv)
    _configure_logging()
    options = options_from_args(args)
    color_mode = args.color if args.color is not None else config.load_color_mode()
    theme = resolve_theme(color_mode, is_tty=sys.stdout.isatty())
    color_rules = resolve_ls_colors(configured=config.load_ls_colors())
    return list_paths(
        args.paths,
        options,
        StreamSink(sys.stdout, sys.stderr),
        theme=theme,
        color_rules=color_rules,
    )


if __name__ == "__main__":
    sys.exit(main())
