"""Test configuration and fixtures for dirtree."""

import os

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small project tree.

    Layout::

        a.txt          (5 bytes)
        b/             (empty)
        .git/          (empty)
    """
    (tmp_path / "a.txt").write_text("hello")
    (tmp_path / "b").mkdir()
    (tmp_path / ".git").mkdir()
    return tmp_path


@pytest.fixture
def unreadable_directory(tmp_path):
    """Create ``locked/`` containing a file, with read permission removed.

    Skips when permissions are not enforced (e.g. running as root).
    """
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("secret")
    locked.chmod(0)
    try:
        if os.access(locked, os.R_OK):
            pytest.skip("Directory permissions are not enforced for this user")
        yield locked
    finally:
        locked.chmod(0o755)
