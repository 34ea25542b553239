from typing import Optional

from dirtree.types import PathType


class OutputError(Exception):
    """
    Exception raised when the tree output destination cannot be opened or written.

    Unlike unreadable directories, which are silently rendered as empty subtrees,
    a failing output sink is fatal: the CLI reports the message and exits with a
    non-zero status.

    Attributes:
        destination (Optional[str]): The output file, or None for standard output.

    Example:
        >>> error = OutputError("tree.txt", "Permission denied")
        >>> str(error)
        'Cannot write to tree.txt: Permission denied'
        >>> str(OutputError(None, "No space left on device"))
        'Cannot write to standard output: No space left on device'
    """

    def __init__(self, destination: Optional[PathType], reason: str) -> None:
        """
        Initialize the exception with the failing destination and the reason.

        Args:
            destination: Path of the output file, or None for standard output.
            reason: Description of the underlying failure.
        """
        self.destination = None if destination is None else str(destination)
        target = self.destination if self.destination is not None else "standard output"
        super().__init__(f"Cannot write to {target}: {reason}")
