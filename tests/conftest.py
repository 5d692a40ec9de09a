"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from fsbridge.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Plain UTF-8 text files
        with open(os.path.join(temp_dir, "a.txt"), "wb") as f:
            f.write(b"hello")

        with open(os.path.join(temp_dir, "unicode.txt"), "wb") as f:
            f.write("café ☃ \U0001f600\n".encode("utf-8"))

        # Line endings and BOM must come back untouched
        with open(os.path.join(temp_dir, "crlf.txt"), "wb") as f:
            f.write(b"line1\r\nline2\r\n")

        with open(os.path.join(temp_dir, "bom.txt"), "wb") as f:
            f.write(b"\xef\xbb\xbfwith bom")

        with open(os.path.join(temp_dir, "empty.txt"), "wb") as f:
            pass

        # Latin-1 bytes are not valid UTF-8
        with open(os.path.join(temp_dir, "latin1.txt"), "wb") as f:
            f.write("café".encode("latin-1"))

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        with open(os.path.join(subdir, "nested.md"), "w", encoding="utf-8") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
