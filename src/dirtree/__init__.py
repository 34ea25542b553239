"""Directory tree visualization utilities.

This package renders a directory hierarchy as an indented box-drawing tree,
with name-based filtering, depth limiting, symlink highlighting and optional
size/count statistics.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"
