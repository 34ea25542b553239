"""Signal handling utilities for the dirtree CLI.

A tree is written as a stream, so an interrupted run simply stops writing:
SIGPIPE (the reader went away, e.g. ``dirtree | head``) and SIGINT (Ctrl+C)
are recorded here, checked by the output writer before every write and turned
into the conventional exit codes by the CLI.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

# SIGPIPE does not exist on Windows
SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT so that output can stop cleanly.

    Each handler restores the original disposition after the first signal, so a
    second Ctrl+C terminates the process the usual way.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_handlers: Dict[int, Any] = {}

    @property
    def interrupted(self) -> bool:
        """Whether output should stop because of a received signal."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def install(self) -> None:
        """Install handlers for SIGINT and, where available, SIGPIPE."""
        self._install(signal.SIGINT, self.handle_sigint)
        if SIGPIPE is not None:
            self._install(SIGPIPE, self.handle_sigpipe)

    def _install(self, signum: int, handler: Any) -> None:
        self._original_handlers[signum] = signal.getsignal(signum)
        signal.signal(signum, handler)

    def _restore(self, signum: int) -> None:
        if signum in self._original_handlers:
            signal.signal(signum, self._original_handlers.pop(signum))

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        self._restore(signum)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        self._restore(signum)

    def exit_code(self) -> Optional[int]:
        """Exit status implied by the received signals, or None if none was received."""
        if self.sigpipe_received.is_set():
            return 141
        if self.sigint_received.is_set():
            return 130
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Cleanup function registered with atexit.

    Redirects stdout to the null device if we received SIGPIPE or SIGINT to prevent
    additional error messages during shutdown.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


# Register the cleanup function
atexit.register(cleanup)
