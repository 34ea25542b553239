"""Recursive, depth-bounded directory walk producing tree lines.

This module provides the TreeWalker class, which lists a directory hierarchy in
sorted order, applies exclusion rules, renders one line per surviving entry and
optionally folds every rendered entry into a statistics accumulator.
"""

import logging
import os
from typing import AbstractSet, Iterator, List, Optional

from dirtree.config import TraversalConfig
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.name_rules import NameExclusionRules
from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.file_system_tree.file_identifier import FileIdentifier
from dirtree.file_system_tree.tree_stats import TreeStats
from dirtree.rendering import TreeLine, TreeRenderer, child_prefix

logger = logging.getLogger(__name__)


class TreeWalker:
    """Streams the tree representation of a directory, one line at a time.

    The walk is a single-threaded depth-first descent. Children of each directory
    are filtered by name, sorted by full path (directories and files interleaved)
    and rendered with box-drawing branches, recursing into directories until the
    configured depth is reached.

    Unreadable Directories:
        Traversal is best effort. A directory that cannot be listed (permission
        denied, removed during the walk, not actually a directory) is treated as
        having no children: its own line is still rendered by its parent, and the
        walk continues with its siblings. Such failures are logged at DEBUG level
        and never raised.

    Symbolic Link Behavior:
        Symlinks to directories are followed like directories. A directory that is
        already one of its own ancestors on the current descent path is rendered but
        not expanded, which keeps symlink cycles finite.

    Statistics:
        When a TreeStats instance is attached, every rendered entry is recorded
        exactly once, before its line is produced and before its subtree is walked.
        Totals are only complete once the stream is exhausted.

    Attributes:
        config (TraversalConfig): Root, depth limit and filtering options.
        stats (Optional[TreeStats]): Accumulator fed during the walk, if any.
        renderer (TreeRenderer): Formats the root line and entry lines.
        exclusion_rules (BaseExclusionRules): Decides which entry names are skipped.

    Example:
        >>> walker = TreeWalker(TraversalConfig("src", max_depth=1))  # doctest: +SKIP
        >>> print(walker.get_tree_representation())  # doctest: +SKIP
        src
        ├── main.py
        └── utils
    """

    def __init__(
        self,
        config: TraversalConfig,
        stats: Optional[TreeStats] = None,
        renderer: Optional[TreeRenderer] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        """Initialize a TreeWalker.

        Args:
            config: Traversal settings.
            stats: Accumulator to update while walking. Defaults to None (no statistics).
            renderer: Line renderer. Defaults to a plain TreeRenderer.
            exclusion_rules: Name filter. Defaults to NameExclusionRules built from config.
        """
        self.config = config
        self.stats = stats
        self.renderer = renderer if renderer is not None else TreeRenderer()
        self.exclusion_rules = (
            exclusion_rules if exclusion_rules is not None else NameExclusionRules.from_config(config)
        )

    def stream_tree(self) -> Iterator[TreeLine]:
        """Generate the tree one line at a time, starting with the root line.

        Yields:
            Rendered lines without trailing newlines.

        Example:
            >>> walker = TreeWalker(TraversalConfig("src"))  # doctest: +SKIP
            >>> for line in walker.stream_tree():  # doctest: +SKIP
            ...     print(line.plain)
            src
            ├── main.py
            └── utils
                └── helpers.py
        """
        root = self.config.display_root
        yield self.renderer.render_root(root)

        root_id = FileIdentifier.from_path(root)
        ancestors = frozenset((root_id,)) if root_id is not None else frozenset()
        yield from self._walk(root, "", 0, ancestors)

    def get_tree_representation(self) -> str:
        """Get the complete tree as plain text.

        Returns:
            All lines joined by newlines, without styling.
        """
        return "\n".join(line.plain for line in self.stream_tree())

    def _walk(
        self, path: str, prefix: str, level: int, ancestors: AbstractSet[FileIdentifier]
    ) -> Iterator[TreeLine]:
        """Render the children of ``path`` and, recursively, their subtrees.

        Args:
            path: Directory whose children are rendered.
            prefix: Continuation markers for lines at this level.
            level: Rendered level of the children, 0 for the root's children.
            ancestors: Identifiers of the directories on the current descent path.

        Yields:
            One line per rendered entry in this subtree.
        """
        if self.config.max_depth is not None and level >= self.config.max_depth:
            return

        children = self._list_children(path)
        total = len(children)

        for index, child_path in enumerate(children):
            entry = DirectoryEntry.from_path(child_path, index, total)

            if self.stats is not None:
                self.stats.record(entry)

            yield self.renderer.render_entry(entry, prefix)

            if not entry.is_dir:
                continue

            entry_id = FileIdentifier.from_path(entry.path)
            if entry_id is not None:
                if entry_id in ancestors:
                    logger.debug("Not descending into %s: directory is its own ancestor", entry.path)
                    continue
                descendants_ancestors = ancestors | {entry_id}
            else:
                descendants_ancestors = ancestors

            yield from self._walk(
                entry.path, child_prefix(prefix, entry.is_last), level + 1, descendants_ancestors
            )

    def _list_children(self, path: str) -> List[str]:
        """List, filter and sort the children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Full paths of the surviving children in ascending order, or an empty list
            if the directory cannot be read.
        """
        try:
            names = os.listdir(path)
        except OSError as e:
            logger.debug("Skipping contents of %s: %s", path, e)
            return []

        return sorted(os.path.join(path, name) for name in names if not self.exclusion_rules.exclude(name))
