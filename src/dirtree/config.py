"""Immutable configuration for a single tree traversal."""

import argparse
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from dirtree.types import PathType

COLOR_MODES = ("auto", "always", "never")


@dataclass(frozen=True)
class TraversalConfig:
    """Settings for one run of the tree walker.

    The configuration is built once, from command-line input or directly by
    library callers, and never changes during the traversal.

    Attributes:
        root: Directory to traverse. Kept exactly as given so that the first
            output line shows the path the way the user typed it.
        max_depth: Number of rendered levels, where the root's direct children are
            level 0. None means unbounded.
        show_all: Disable the default ignore list. Explicit ignores still apply.
        ignore: Names that are always skipped.
        include: Names rescued from the default ignore list.
        output: File to write the tree to, or None for standard output.
        stats: Report directory/file counts and total size after the tree.
        color: Styling mode: "auto" (only on terminals), "always" or "never".

    Example:
        >>> config = TraversalConfig(".", max_depth=2, ignore=frozenset({"docs"}))
        >>> config.display_root
        '.'
        >>> TraversalConfig(".", max_depth=-1)
        Traceback (most recent call last):
            ...
        ValueError: max_depth must be non-negative, got -1
    """

    root: PathType = "."
    max_depth: Optional[int] = None
    show_all: bool = False
    ignore: FrozenSet[str] = field(default_factory=frozenset)
    include: FrozenSet[str] = field(default_factory=frozenset)
    output: Optional[Path] = None
    stats: bool = False
    color: str = "auto"

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.color not in COLOR_MODES:
            raise ValueError(f"Invalid color mode: {self.color}. Must be one of: {', '.join(COLOR_MODES)}")
        # Accept any iterable of names from library callers
        object.__setattr__(self, "ignore", _as_names(self.ignore))
        object.__setattr__(self, "include", _as_names(self.include))

    @property
    def display_root(self) -> str:
        """The root path as it appears on the first output line."""
        return os.fspath(self.root)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TraversalConfig":
        """Build a configuration from parsed command-line arguments.

        Args:
            args: Namespace produced by the parser from dirtree.cli.argparser.

        Returns:
            The equivalent TraversalConfig.

        Raises:
            ValueError: If any value is out of range.
        """
        return cls(
            root=args.path,
            max_depth=args.depth,
            show_all=args.show_all,
            ignore=frozenset(args.ignore or ()),
            include=frozenset(args.include or ()),
            output=args.output,
            stats=args.stats,
            color=args.color,
        )


def _as_names(names: Iterable[str]) -> FrozenSet[str]:
    if isinstance(names, str):
        # A bare string would otherwise be split into characters
        return frozenset((names,))
    return frozenset(names)
