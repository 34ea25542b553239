"""Command-line interface for dirtree.

This module provides the command-line interface for dirtree, which prints a
directory hierarchy as an indented tree. It handles command-line argument
parsing, output destination and styling, optional statistics, timing and
signal management for graceful interruption handling.

Key Features:
    - Depth-limited, sorted directory tree visualization
    - Default ignore list for VCS, OS metadata, dependency and build directories
    - Explicit ignores and force-includes by exact name
    - Colored directory and symlink names on terminals
    - Optional directory/file counts and total size
    - Output redirection to a file
    - Signal handling (SIGPIPE on Unix systems, SIGINT)

Output:
    The tree (and the statistics block, if requested) goes to the output file or
    to stdout. The elapsed-time line always goes to stdout, after everything else.

Exit Codes:
    0: Successful completion (including when some directories could not be read)
    1: Runtime error, e.g. the output file cannot be created or written
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Basic usage to display a directory
    $ dirtree /path/to/dir

    # Two levels, with statistics, written to a file
    $ dirtree -d 2 --stats -o tree.txt /path/to/dir
"""

import logging
import os
import sys
import time
from typing import Optional

from rich.color import ColorSystem

from dirtree.cli.argparser import create_parser
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.config import TraversalConfig
from dirtree.file_system_tree.tree_stats import TreeStats
from dirtree.file_system_tree.tree_walker import TreeWalker
from dirtree.formatting import format_duration, format_size
from dirtree.rendering import TreeLine

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Send dirtree log records to stderr.

    Args:
        verbose: Log DEBUG records (such as skipped directories) instead of only warnings.
    """
    package_logger = logging.getLogger("dirtree")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def use_color(color: str, writer: SafeWriter) -> bool:
    """Decide whether tree lines are styled.

    Args:
        color: "always", "never", or "auto" to style only when the sink is a terminal.
        writer: The output sink.
    """
    return color == "always" or (color == "auto" and writer.isatty())


def color_system_for(styled: bool) -> Optional[ColorSystem]:
    """Map the styling decision to the ANSI color system used for names."""
    return ColorSystem.STANDARD if styled else None


def render_line(line: TreeLine, color_system: Optional[ColorSystem]) -> str:
    """Render one tree line, including its trailing newline.

    Names are written as they are: tabs, carriage returns and other control
    characters are neither expanded nor removed.
    """
    return line.render(color_system) + "\n"


def check_root(root: str) -> None:
    """Warn if the root cannot be listed; the tree then consists of the root line only."""
    try:
        os.listdir(root)
    except OSError as e:
        logger.warning("%s is not a readable directory: %s", root, e.strerror or e)


def format_stats(stats: TreeStats) -> str:
    """Format the traversal statistics into a human-readable string.

    Args:
        stats: Totals collected during the traversal.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {stats.directory_count}",
        f"Files: {stats.file_count}",
        f"Total size: {format_size(stats.total_size)}",
    ]
    return "\n".join(result)


def run(config: TraversalConfig) -> None:
    """Write the tree described by ``config``, then the elapsed time.

    Args:
        config: Traversal and output settings.

    Raises:
        OutputError: If the output destination cannot be opened or written.
    """
    check_root(config.display_root)

    stats = TreeStats() if config.stats else None
    walker = TreeWalker(config, stats=stats)
    start = time.perf_counter()

    # Set up output
    output = config.output if config.output is not None else sys.stdout.fileno()

    with SafeWriter(output) as safe_writer:
        color_system = color_system_for(use_color(config.color, safe_writer))
        try:
            for line in walker.stream_tree():
                safe_writer.write(render_line(line, color_system))

            if stats is not None:
                safe_writer.write("\n" + format_stats(stats) + "\n")
        except BrokenPipeError:
            # SafeWriter will automatically close in the context manager
            return

    elapsed = time.perf_counter() - start
    print(f"Elapsed time: {format_duration(elapsed)}", flush=True)


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
        args = parser.parse_args()
        setup_logging(args.verbose)

        run(TraversalConfig.from_args(args))

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
