"""Command-line argument parsing for lstree.

This module defines the command-line interface for lstree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from lstree import __version__
from lstree.config import MAX_DEPTH
from lstree.entry_tree.symlink_action import SymlinkAction
from lstree.rendering.identity_action import IdentityAction


def non_negative_int(value: str) -> int:
    """Argument type for depth budgets from 0 to MAX_DEPTH.

    Args:
        value: The raw command-line value.

    Returns:
        The parsed integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer in that range.
    """
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be 0 or greater, got {depth}")
    if depth > MAX_DEPTH:
        raise argparse.ArgumentTypeError(f"depth must be {MAX_DEPTH} or less, got {depth}")
    return depth


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with lstree's options.
    """
    description = """
    lstree: List the contents of a directory, optionally as a tree.

    By default the immediate contents of the directory are printed on one line.
    A depth greater than 1 prints an indented tree, descending that many levels.
    The list mode prints permissions, owner, group and size of every entry.

    Hidden entries (names starting with ".") are left out unless -a/--all is
    given. A hidden directory is never descended into.

    List mode and tree mode cannot be combined; when both are requested the
    detailed listing of the top directory is printed and a warning is logged.
    """

    epilog = """
    Examples:
      # List the current directory
      lstree

      # Include hidden entries
      lstree -a /path/to/dir

      # Show permissions, owner, group and size
      lstree -l /path/to/dir

      # Print a tree three levels deep
      lstree -t 3 /path/to/dir
      lstree --recursive 3 /path/to/dir

      # Show symlinks as leaves instead of leaving them out
      lstree -S show -t 2 /path/to/dir

      # More diagnostics on stderr (repeat for debug output)
      lstree -vv /path/to/dir

    Environment:
      LSTREE_LOG_LEVEL    default log level (DEBUG, INFO, WARNING, ERROR)
    """

    parser = argparse.ArgumentParser(
        prog="lstree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"lstree {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to list (default: the current working directory).",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Show permissions, owner, group and size of every entry.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Include entries whose name starts with '.'.",
    )
    parser.add_argument(
        "-t",
        "--tree",
        "-r",
        "--recursive",
        dest="depth",
        type=non_negative_int,
        metavar="N",
        default=1,
        help=(
            f"Depth to descend, 0 to {MAX_DEPTH} (default: 1, the directory's own contents). "
            "Values above 1 print a tree."
        ),
    )
    parser.add_argument(
        "-S",
        "--symlinks",
        choices=[action.value for action in SymlinkAction],
        default=SymlinkAction.SKIP.value,
        help="Leave symlinks out of the listing, or show them as entries (default: skip). Never followed.",
    )
    parser.add_argument(
        "--identity",
        choices=[action.value for action in IdentityAction],
        default=IdentityAction.PLACEHOLDER.value,
        help=(
            "How list mode handles an owner or group without a name: print a placeholder, "
            "or skip the entry (default: placeholder)."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (can be specified multiple times).",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"--output must be a file, not a directory: {args.output}")
