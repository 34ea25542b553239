"""Safe output writing utilities for the dirtree CLI.

This module provides the output sink the tree is written to: either an
already-open file descriptor (standard output) or a file created for the run.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler
from dirtree.exceptions import OutputError


class SafeWriter:
    """Signal-aware output sink for tree lines.

    Writes go straight to the underlying file descriptor, so output is never
    held back in a buffer when the run is interrupted. Failures to open or write
    the destination are fatal and raised as OutputError; a closed pipe is raised
    as BrokenPipeError so the caller can stop quietly.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
        encoding: Text encoding used for every write.
    """

    encoding = "utf-8"

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path. A path is created, or
                truncated if it already exists.

        Raises:
            OutputError: If the file cannot be opened for writing.
            TypeError: If ``file`` is neither a descriptor nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            # It's already a file descriptor
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            try:
                self._file_obj = path.open("wb")
            except OSError as e:
                raise OutputError(path, e.strerror or str(e)) from e
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    @property
    def destination(self) -> Optional[str]:
        """The output path, or None when writing to a descriptor."""
        return None if isinstance(self.file, int) else str(self.file)

    def write(self, data: str) -> int:
        """Safely write data with signal checking.

        Names that are not valid UTF-8 are written back as their original bytes.

        Args:
            data: String data to write.

        Returns:
            The number of characters written.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is broken.
            OutputError: If any other I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        view = memoryview(data.encode(self.encoding, "surrogateescape"))
        try:
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise OutputError(self.destination, e.strerror or str(e)) from e
        return len(data)

    def isatty(self) -> bool:
        """Whether the destination is a terminal, used to decide on styling."""
        if self._closed:
            return False
        return os.isatty(self.fd)

    def close(self) -> None:
        """Close the file if it was opened by this class.

        This method ensures the writer is marked as closed even if the
        underlying close operation fails with a broken pipe error.
        """
        if self._closed:
            return

        self._closed = True
        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise OutputError(self.destination, e.strerror or str(e)) from e

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Exit the context manager and close resources.

        If closing fails while an exception is already propagating out of the
        with block, the original exception is kept.
        """
        try:
            self.close()
        except OutputError:
            if exc_type is None:
                raise
