"""Command-line front door for xtree.

Parses CLI options, merges them over config defaults, and runs one walk.
The filtered tree goes to stdout; skipped-entry warnings go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import Defaults, load_defaults
from .errors import InvalidArgument, PathError
from .file_tree_model import WalkResult, parse_depth, walk_tree
from .render import COLOR_MODES, render_tree, render_warnings, should_use_color

LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"
EXIT_INTERRUPTED = 130


def _depth(value: str) -> int:
    """argparse type for non-negative depth values."""
    try:
        return parse_depth(value)
    except InvalidArgument as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


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
    parser = argparse.ArgumentParser(
        prog="xtree",
        description="A lightweight directory tree generator that keeps only entries whose names contain SEARCH.",
    )
    parser.add_argument("search", nargs="?", default=None, help="Case-insensitive text to look for in entry names.")
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to generate tree from (default: current directory).",
    )
    parser.add_argument(
        "depth",
        nargs="?",
        type=_depth,
        default=None,
        help="Levels of subdirectories to descend into (default: 3; 0 lists only the directory itself).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        dest="depth_option",
        type=_depth,
        default=None,
        metavar="N",
        help="Same as the positional depth; wins when both are given.",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="Highlight matches with ANSI colors (default: auto, only on a TTY).",
    )
    parser.add_argument("--no-color", dest="color", action="store_const", const="never", help="Same as --color=never.")
    parser.add_argument(
        "--dirs-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Match directory names only and leave files out of the tree.",
    )
    parser.add_argument(
        "--hidden",
        dest="show_hidden",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include dot-entries; on unless the config file turns it off.",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories, still bounded by depth.",
    )
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Clip every output row to this many columns.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log skipped entries to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity > 0 else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("xtree").setLevel(level)


def _pick(value, fallback):
    return fallback if value is None else value


def run(args: argparse.Namespace, defaults: Defaults) -> WalkResult:
    """Walk the tree described by parsed ``args`` and print it."""
    depth = _pick(args.depth_option, _pick(args.depth, defaults.depth))
    try:
        result = walk_tree(
            args.directory,
            args.search,
            depth,
            show_hidden=_pick(args.show_hidden, defaults.show_hidden),
            dirs_only=_pick(args.dirs_only, defaults.dirs_only),
            follow_symlinks=args.follow_symlinks,
        )
    except PathError as exc:
        raise SystemExit(f"xtree: {exc}") from exc

    color_mode = _pick(args.color, defaults.color)
    sys.stdout.write(
        render_tree(result, color=should_use_color(color_mode, sys.stdout), max_cols=args.max_cols)
    )
    if result.warnings:
        sys.stdout.flush()
        warn_color = should_use_color(color_mode, sys.stderr)
        for line in render_warnings(result.warnings, color=warn_color):
            sys.stderr.write(line + "\n")
    return result


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the filtered tree.

    A missing search term prints help and exits successfully, zero matches is
    not an error, and an invalid root exits non-zero with a message.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.search is None:
        parser.print_help()
        return

    try:
        run(args, load_defaults())
    except KeyboardInterrupt:
        raise SystemExit(EXIT_INTERRUPTED) from None


if __name__ == "__main__":
    main()
