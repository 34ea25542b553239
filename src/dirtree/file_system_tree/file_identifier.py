"""File identifier for uniquely identifying directories by device and inode."""

import os
from typing import NamedTuple, Optional

from dirtree.types import PathType


class FileIdentifier(NamedTuple):
    """Device and inode pair that uniquely identifies a directory.

    The tree walker keeps the identifiers of the directories on the current
    descent path. A directory reached again through a symbolic link while it is
    still one of its own ancestors would make the walk endless, so it is shown
    but not expanded.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.

    Example:
        >>> FileIdentifier(123, 456) == FileIdentifier(123, 456)
        True
        >>> FileIdentifier(123, 456)
        FileIdentifier(device_id=123, inode_number=456)
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Identify the file a path resolves to, following symlinks.

        Args:
            path: Path to identify.

        Returns:
            The identifier, or None if the path cannot be stat'ed.

        Note:
            On Windows, st_ino might not be as reliable as on Unix systems, but Python's
            os.stat implementation provides reasonable values for loop detection.
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
