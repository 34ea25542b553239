"""Running totals collected during a traversal."""

from dataclasses import dataclass

from .directory_entry import DirectoryEntry


@dataclass
class TreeStats:
    """Directory count, file count and cumulative size of the rendered entries.

    A single instance is created empty by the caller, handed to the tree walker
    and read once the traversal has finished. Only rendered entries are counted:
    filtered names and anything below the depth limit never reach the
    accumulator. The root directory itself is not counted.

    Attributes:
        directory_count (int): Number of directories (including symlinks to directories).
        file_count (int): Number of non-directory entries.
        total_size (int): Sum of the sizes of non-directory entries whose size was readable.

    Example:
        >>> stats = TreeStats()
        >>> stats.record(DirectoryEntry("a.txt", "a.txt", False, False, 5, 0, 2))
        >>> stats.record(DirectoryEntry("b", "b", True, False, None, 1, 2))
        >>> stats
        TreeStats(directory_count=1, file_count=1, total_size=5)
    """

    directory_count: int = 0
    file_count: int = 0
    total_size: int = 0

    def record(self, entry: DirectoryEntry) -> None:
        """Fold one rendered entry into the totals."""
        if entry.is_dir:
            self.directory_count += 1
            return

        self.file_count += 1
        if entry.size is not None:
            self.total_size += entry.size

    @property
    def entry_count(self) -> int:
        return self.directory_count + self.file_count
