"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dirtree import __version__
from dirtree.config import COLOR_MODES
from dirtree.exclusion_rules.name_rules import DEFAULT_IGNORED_NAMES


def non_negative_int(value: str) -> int:
    """Argument type for depth limits.

    Args:
        value: Raw command-line value.

    Returns:
        The parsed integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= 0.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid depth: {number} is negative")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: Print the contents of a directory as an indented tree.

    Entries are listed in ascending path order, directories and files together,
    with box-drawing branches showing the structure. Version control, OS metadata,
    dependency, build and cache directories are hidden by default.

    Directories that cannot be read are shown without contents; they never
    cause the run to fail.
    """

    epilog = f"""
    Hidden by default (see --show-all and --include):
      {" ".join(sorted(DEFAULT_IGNORED_NAMES))}

    Examples:
      # Tree of the current directory
      dirtree

      # Only the first two levels
      dirtree -d 2 /path/to/project

      # Show everything, including .git and node_modules
      dirtree --show-all /path/to/project

      # Hide extra names, and show 'build' even though it is hidden by default
      dirtree --ignore docs --ignore README.md --include build /path/to/project

      # Write the tree to a file and report counts and total size
      dirtree --stats -o tree.txt /path/to/project

      # Display version information and exit
      dirtree -V
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to display (default: current directory). Shown verbatim on the first line.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=non_negative_int,
        metavar="N",
        help="Maximum number of levels to display. Unlimited if not specified.",
    )
    parser.add_argument(
        "--show-all",
        action="store_true",
        help="Disable the default ignore list. Names given with --ignore are still hidden.",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Hide entries with this exact name (can be specified multiple times). Takes precedence over --include.",
    )
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        metavar="NAME",
        help="Show entries with this name even though it is on the default ignore list (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path, created or truncated. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print the number of directories and files and their total size after the tree.",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help="Color directory and symlink names (default: auto, only when writing to a terminal).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped directories and other diagnostics to stderr.",
    )

    return parser
