"""
Local file system adapter implementation for file operations.
"""

import logging
import os
from collections.abc import Iterator

from typing_extensions import override

from file_navigator.entities.file import File
from file_navigator.exceptions import FileRepositoryError
from file_navigator.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    @override
    def list_names(self, directory: str) -> list[str]:
        """
        List the names of the immediate entries of a directory.

        Args:
            directory: Path to the directory to enumerate

        Returns:
            Entry names in the order os.listdir yields them

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)
            return os.listdir(directory)
        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")

    @override
    def has_entry(self, directory: str, name: str) -> bool:
        # Rescanned on every call; entries can change between checks.
        return name in self.list_names(directory)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_readable_directory(self, path: str) -> bool:
        return os.path.isdir(path) and os.access(path, os.R_OK | os.X_OK)

    @override
    def read_lines(self, path: str) -> Iterator[str]:
        """
        Stream a text file line by line.

        Undecodable bytes are replaced rather than aborting the stream.

        Args:
            path: Path to the file to read

        Yields:
            Lines without their trailing newline

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    yield line.rstrip("\r\n")
        except OSError as e:
            self._logger.warning(f"Could not read file {path}: {e}")
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def get_details(self, path: str) -> File:
        """
        Read the attributes of a file or directory.

        Args:
            path: Path to the entry

        Returns:
            A File entity with freshly read attributes

        Raises:
            FileRepositoryError: If the attributes cannot be read
        """
        try:
            return File(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to read attributes of {path}: {str(e)}")
