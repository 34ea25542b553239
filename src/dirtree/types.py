from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Kind of a directory entry as seen by the tree walker.

    Symbolic links are not a kind of their own: a link is reported as the kind
    of its target and flagged separately, so a link to a directory is walked
    like any other directory.

    Attributes:
        FILE: Anything that is not a directory (regular files, broken links, devices)
        DIRECTORY: Directory, or a symlink resolving to one
    """

    FILE = "file"
    DIRECTORY = "directory"
