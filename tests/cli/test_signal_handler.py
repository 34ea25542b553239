"""Unit tests for the signal handler module in dirtree CLI."""

import os
import signal
from unittest.mock import MagicMock, patch

import pytest

from dirtree.cli import signal_handler as signal_handler_module
from dirtree.cli.signal_handler import SignalHandler, cleanup


@pytest.fixture
def mock_os():
    """Create a mock for os module functions used in signal handling."""
    with patch("dirtree.cli.signal_handler.os", autospec=True) as mock:
        mock.open.return_value = 123  # Mock file descriptor
        mock.dup2 = MagicMock()
        mock.devnull = "/dev/null"
        mock.O_WRONLY = os.O_WRONLY
        yield mock


@pytest.fixture
def fresh_signal_handler():
    """Create a fresh SignalHandler instance for tests.

    This avoids interference with the singleton instance.
    """
    return SignalHandler()


def test_signal_handler_initialization(fresh_signal_handler):
    assert not fresh_signal_handler.sigpipe_received.is_set()
    assert not fresh_signal_handler.sigint_received.is_set()
    assert not fresh_signal_handler.interrupted
    assert fresh_signal_handler.exit_code() is None


def test_install_registers_handlers(fresh_signal_handler):
    with patch("signal.signal") as mock_signal, patch("signal.getsignal", return_value=signal.SIG_DFL):
        fresh_signal_handler.install()

    mock_signal.assert_any_call(signal.SIGINT, fresh_signal_handler.handle_sigint)
    if signal_handler_module.SIGPIPE is not None:
        mock_signal.assert_any_call(signal.SIGPIPE, fresh_signal_handler.handle_sigpipe)


def test_handle_sigint_restores_original_handler(fresh_signal_handler):
    original = MagicMock()
    with patch("signal.signal") as mock_signal, patch("signal.getsignal", return_value=original):
        fresh_signal_handler.install()
        mock_signal.reset_mock()

        fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    assert fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.interrupted
    assert fresh_signal_handler.exit_code() == 130
    mock_signal.assert_called_once_with(signal.SIGINT, original)


@pytest.mark.skipif(signal_handler_module.SIGPIPE is None, reason="SIGPIPE not available on this platform")
def test_handle_sigpipe(fresh_signal_handler):
    with patch("signal.signal"), patch("signal.getsignal", return_value=signal.SIG_DFL):
        fresh_signal_handler.install()
        fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, None)

    assert fresh_signal_handler.sigpipe_received.is_set()
    assert fresh_signal_handler.exit_code() == 141


def test_sigpipe_exit_code_takes_precedence(fresh_signal_handler):
    fresh_signal_handler.sigint_received.set()
    fresh_signal_handler.sigpipe_received.set()

    assert fresh_signal_handler.exit_code() == 141


def test_handler_without_install_does_not_touch_signals(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    mock_signal.assert_not_called()
    assert fresh_signal_handler.sigint_received.is_set()


def test_cleanup_without_signals(mock_os):
    with patch.object(signal_handler_module, "signal_handler", SignalHandler()):
        cleanup()

    mock_os.open.assert_not_called()
    mock_os.dup2.assert_not_called()


def test_cleanup_after_signal(mock_os):
    handler = SignalHandler()
    handler.sigpipe_received.set()

    with patch.object(signal_handler_module, "signal_handler", handler), patch("sys.stdout") as mock_stdout:
        mock_stdout.fileno.return_value = 1
        cleanup()

    mock_os.open.assert_called_once_with("/dev/null", os.O_WRONLY)
    mock_os.dup2.assert_called_once_with(123, 1)
