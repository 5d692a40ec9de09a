"""
Tests for the FilesCommandHandler.
"""

import os

import pytest
from unittest.mock import MagicMock

from fsbridge.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fsbridge.entities.command_result import Exists, Text
from fsbridge.exceptions import (
    InvalidArgumentError,
    InvalidEncodingError,
    NotFoundError,
    PathIsDirectoryError,
    UnknownCommandError,
)
from fsbridge.use_cases.commands.files_commands import FilesCommandHandler
from fsbridge.use_cases.files.file_exists import FileExistsUseCase
from fsbridge.use_cases.files.read_all_text import ReadAllTextUseCase


@pytest.fixture
def handler(mock_logger):
    adapter = LocalFileSystemAdapter(mock_logger)
    return FilesCommandHandler(
        ReadAllTextUseCase(adapter, mock_logger),
        FileExistsUseCase(adapter, mock_logger),
        mock_logger,
    )


@pytest.fixture
def fixtures_cwd(tmp_path, monkeypatch):
    """Working directory containing ./fixtures/a.txt with 'hello'."""
    fixtures = tmp_path / "fixtures"
    fixtures.mkdir()
    (fixtures / "a.txt").write_bytes(b"hello")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestFilesCommandHandler:
    """Test cases for the FilesCommandHandler."""

    def test_fixture_scenario(self, handler, fixtures_cwd):
        """Test the reference scenario with paths relative to the working directory."""
        assert handler.read_all_text("./fixtures/a.txt") == "hello"
        assert handler.file_exists("./fixtures/a.txt") is True
        assert handler.file_exists("./fixtures/missing.txt") is False

    def test_round_trip(self, handler, tmp_path):
        """Test that content written externally is read back exactly."""
        content = "first line\nsecond line\r\n\ttabbed ü\n"
        path = tmp_path / "round_trip.txt"
        path.write_bytes(content.encode("utf-8"))

        assert handler.read_all_text(str(path)) == content

    def test_dispatch_read_all_text(self, handler, fixtures_cwd):
        result = handler.dispatch("read_all_text", {"name": "fixtures/a.txt"})

        assert result == Text("hello")
        assert result.kind == "text"

    def test_dispatch_file_exists(self, handler, fixtures_cwd):
        assert handler.dispatch("file_exists", {"name": "fixtures"}) == Exists(True)
        assert handler.dispatch("file_exists", {"name": "nope"}) == Exists(False)

    def test_dispatch_propagates_typed_errors(self, handler, temp_directory):
        """Test that read failures reach the caller with their kind."""
        with pytest.raises(NotFoundError):
            handler.dispatch(
                "read_all_text", {"name": os.path.join(temp_directory, "missing.txt")}
            )
        with pytest.raises(PathIsDirectoryError):
            handler.dispatch("read_all_text", {"name": temp_directory})
        with pytest.raises(InvalidEncodingError):
            handler.dispatch(
                "read_all_text", {"name": os.path.join(temp_directory, "latin1.txt")}
            )

    def test_dispatch_unknown_command(self, handler):
        with pytest.raises(UnknownCommandError, match="Unknown command: write_file"):
            handler.dispatch("write_file", {"name": "a.txt"})

    def test_dispatch_missing_argument(self, handler):
        with pytest.raises(InvalidArgumentError, match="Missing required argument 'name'"):
            handler.dispatch("read_all_text", {})

    def test_dispatch_wrong_argument_type(self, handler):
        with pytest.raises(InvalidArgumentError, match="Path must be a string, got int"):
            handler.dispatch("file_exists", {"name": 42})

    def test_dispatch_non_mapping_arguments(self, handler):
        with pytest.raises(InvalidArgumentError, match="must be an object"):
            handler.dispatch("file_exists", ["a.txt"])  # type: ignore[arg-type]

    def test_direct_methods_reject_non_strings(self, handler):
        with pytest.raises(InvalidArgumentError):
            handler.read_all_text(None)  # type: ignore[arg-type]

    def test_available_commands(self, handler):
        specs = handler.available_commands()

        assert [s["name"] for s in specs] == ["read_all_text", "file_exists"]
        for spec in specs:
            assert spec["parameters"]["required"] == ["name"]

    def test_dispatch_uses_injected_use_cases(self, mock_logger):
        read_uc = MagicMock(spec=ReadAllTextUseCase)
        read_uc.execute.return_value = "content"
        exists_uc = MagicMock(spec=FileExistsUseCase)
        handler = FilesCommandHandler(read_uc, exists_uc, mock_logger)

        assert handler.dispatch("read_all_text", {"name": "x"}) == Text("content")
        read_uc.execute.assert_called_once_with("x")
        exists_uc.execute.assert_not_called()
