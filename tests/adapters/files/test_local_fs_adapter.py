"""
Tests for the LocalFileSystemAdapter.
"""

import os
from unittest.mock import patch

import pytest

from file_navigator.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_navigator.entities.file import File
from file_navigator.exceptions import FileRepositoryError


class TestLocalFileSystemAdapter:
    """Test cases for the LocalFileSystemAdapter."""

    def test_list_names_success(self, temp_directory, mock_logger):
        """Both files and folders are listed by name."""
        adapter = LocalFileSystemAdapter(mock_logger)
        names = adapter.list_names(temp_directory)

        assert sorted(names) == ["README", "archive", "notes.txt", "photo.jpeg"]

    def test_list_names_keeps_native_order(self, temp_directory, mock_logger):
        """Names come back in os.listdir order, unsorted."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with patch("os.listdir", return_value=["b", "a", "c"]):
            assert adapter.list_names(temp_directory) == ["b", "a", "c"]

    def test_list_names_nonexistent_directory(self, mock_logger):
        """Test listing a non-existent directory."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Directory does not exist"):
            adapter.list_names("/nonexistent/directory")

    def test_list_names_with_file_path(self, temp_directory, mock_logger):
        """Test listing with a file path instead of directory."""
        test_file = os.path.join(temp_directory, "notes.txt")
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Path is not a directory"):
            adapter.list_names(test_file)

    @patch("os.listdir")
    def test_list_names_with_listdir_error(self, mock_listdir, temp_directory, mock_logger):
        """Test list_names when os.listdir raises."""
        mock_listdir.side_effect = PermissionError("Permission denied")
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(
            FileRepositoryError,
            match="Failed to list files in .*: Permission denied",
        ):
            adapter.list_names(temp_directory)

    def test_has_entry(self, temp_directory, mock_logger):
        """Membership is an exact name match among direct children."""
        adapter = LocalFileSystemAdapter(mock_logger)

        assert adapter.has_entry(temp_directory, "notes.txt") is True
        assert adapter.has_entry(temp_directory, "archive") is True
        assert adapter.has_entry(temp_directory, "NOTES.TXT") is False
        assert adapter.has_entry(temp_directory, "old.log") is False

    def test_has_entry_sees_new_files(self, temp_directory, mock_logger):
        """Every check re-reads the directory."""
        adapter = LocalFileSystemAdapter(mock_logger)
        assert adapter.has_entry(temp_directory, "late.txt") is False

        with open(os.path.join(temp_directory, "late.txt"), "w") as f:
            f.write("x")

        assert adapter.has_entry(temp_directory, "late.txt") is True

    def test_is_directory(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        assert adapter.is_directory(os.path.join(temp_directory, "archive")) is True
        assert adapter.is_directory(os.path.join(temp_directory, "README")) is False
        assert adapter.is_directory(os.path.join(temp_directory, "missing")) is False

    def test_is_readable_directory(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        archive = os.path.join(temp_directory, "archive")

        assert adapter.is_readable_directory(archive) is True
        assert adapter.is_readable_directory(os.path.join(temp_directory, "README")) is False

        with patch("os.access", return_value=False):
            assert adapter.is_readable_directory(archive) is False

    def test_read_lines(self, temp_directory, mock_logger):
        """Lines are streamed without their newline."""
        adapter = LocalFileSystemAdapter(mock_logger)
        lines = list(adapter.read_lines(os.path.join(temp_directory, "notes.txt")))

        assert lines == ["first line", "second line"]

    def test_read_lines_replaces_undecodable_bytes(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        lines = list(adapter.read_lines(os.path.join(temp_directory, "photo.jpeg")))

        assert len(lines) == 1
        assert "�" in lines[0]

    def test_read_lines_missing_file(self, temp_directory, mock_logger):
        """Opening a missing file raises once iteration starts."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to read"):
            list(adapter.read_lines(os.path.join(temp_directory, "gone.txt")))

        mock_logger.warning.assert_called_once()

    def test_get_details(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)
        entry = adapter.get_details(os.path.join(temp_directory, "archive"))

        assert isinstance(entry, File)
        assert entry.is_dir is True

    def test_get_details_missing(self, temp_directory, mock_logger):
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="File does not exist"):
            adapter.get_details(os.path.join(temp_directory, "gone"))

    def test_validate_directory_success(self, temp_directory, mock_logger):
        """Test the _validate_directory helper method with a valid directory."""
        adapter = LocalFileSystemAdapter(mock_logger)

        # Should not raise an exception
        adapter._validate_directory(temp_directory)

    def test_initialization_without_logger(self):
        adapter = LocalFileSystemAdapter()

        assert adapter._logger is not None
