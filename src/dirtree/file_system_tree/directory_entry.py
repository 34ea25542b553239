"""Transient description of one listed directory child."""

import os
from dataclasses import dataclass
from typing import Optional

from dirtree.types import EntryKind


@dataclass(frozen=True)
class DirectoryEntry:
    """A single child of a directory, as seen at the moment it was listed.

    Entries are created by the tree walker after filtering and sorting, one per
    rendered line, and discarded once the line is written and the subtree (if
    any) has been walked.

    Attributes:
        name (str): The entry's basename.
        path (str): Full path, the parent path joined with ``name``.
        is_dir (bool): True if the path resolves to a directory. Symlinks are followed.
        is_symlink (bool): True if the entry itself is a symbolic link.
        size (Optional[int]): Size in bytes for non-directories, None for directories
            and for entries whose size could not be read.
        index (int): Position among the filtered siblings, starting at 0.
        total (int): Number of filtered siblings.

    Example:
        >>> entry = DirectoryEntry("a.txt", "root/a.txt", is_dir=False, is_symlink=False, size=5, index=1, total=2)
        >>> entry.is_last, entry.kind
        (True, <EntryKind.FILE: 'file'>)
    """

    name: str
    path: str
    is_dir: bool
    is_symlink: bool
    size: Optional[int]
    index: int
    total: int

    @property
    def is_last(self) -> bool:
        """Whether this entry is the final one among its siblings."""
        return self.index == self.total - 1

    @property
    def kind(self) -> EntryKind:
        return EntryKind.DIRECTORY if self.is_dir else EntryKind.FILE

    @classmethod
    def from_path(cls, path: str, index: int, total: int) -> "DirectoryEntry":
        """Inspect a path and describe it as a directory entry.

        Metadata failures never raise: an entry that cannot be inspected is
        described as a non-symlink, non-directory entry with unknown size.

        Args:
            path: Full path of the entry.
            index: Position among the filtered siblings.
            total: Number of filtered siblings.

        Returns:
            The populated entry.
        """
        # os.path.isdir and os.path.islink already map OSError to False
        is_dir = os.path.isdir(path)
        is_symlink = os.path.islink(path)

        size: Optional[int] = None
        if not is_dir:
            try:
                size = os.stat(path).st_size
            except OSError:
                # Broken symlinks and entries removed since listing
                size = None

        return cls(
            name=os.path.basename(path),
            path=path,
            is_dir=is_dir,
            is_symlink=is_symlink,
            size=size,
            index=index,
            total=total,
        )
