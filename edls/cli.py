"""Command-line front door for edls.

Parses CLI options, merges persisted defaults, and runs the listing pipeline.
Fatal listing errors are reported as a single message on stderr.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from . import config
from .entry_model import executable_detector_for_platform
from .errors import ListingError
from .listing import build_listing, build_listing_options
from .logging_config import get_logger, setup_logging
from .render import render_listing
from .ui_theme import available_theme_names, resolve_theme

logger = get_logger(__name__)


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edls",
        description="List directory entries with type icons, filtering, and sorting.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-p", dest="pattern", default="", help="Filter by case-insensitive regular expression.")
    parser.add_argument("-a", dest="all", action="store_true", help="All files including hidden files.")
    parser.add_argument(
        "-n",
        dest="limit",
        type=_nonnegative_int,
        default=0,
        help="Number of records to show (0 shows all).",
    )
    parser.add_argument("-t", dest="by_time", action="store_true", help="Sort by time, oldest first.")
    parser.add_argument("-s", dest="by_size", action="store_true", help="Sort by file size, smallest first.")
    parser.add_argument("-r", dest="reverse", action="store_true", help="Reverse order while sorting.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--log-level", default=None, help="Diagnostic log level (default: $EDLS_LOG_LEVEL or WARNING).")
    return parser


def _color_disabled(flag: bool) -> bool:
    """Return whether output must be plain text."""
    if flag or config.load_no_color():
        return True
    if os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return not (callable(isatty) and isatty())


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing for one directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed.
    """
    args = build_parser().parse_args()
    setup_logging("edls", args.log_level)

    if default_path is None:
        default_path = Path(".")
    path = Path(args.path) if args.path else default_path

    try:
        options = build_listing_options(
            include_all=args.all or config.load_show_all(),
            pattern=args.pattern,
            by_time=args.by_time,
            by_size=args.by_size,
            reverse=args.reverse,
            limit=args.limit,
        )
        listing = build_listing(path, options, executable_detector_for_platform())
    except ListingError as exc:
        logger.debug("listing aborted: %r", exc)
        raise SystemExit(str(exc)) from None

    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=_color_disabled(args.no_color))
    for line in render_listing(listing.entries, listing.row_count, theme):
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
