"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from file_navigator.entities.file import File


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_names(self, directory: str) -> list[str]:
        """
        List the names of the immediate entries of a directory.

        Args:
            directory: Path to the directory to enumerate

        Returns:
            Entry names in the file system's native enumeration order

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def has_entry(self, directory: str, name: str) -> bool:
        """
        Check whether a directory directly contains an entry with this exact name.

        Args:
            directory: Path to the directory to scan
            name: Entry name to look for

        Returns:
            True if the name is one of the directory's immediate entries

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Check whether a path is an existing directory.

        Args:
            path: Path to check

        Returns:
            True if the path exists and is a directory
        """
        pass

    @abstractmethod
    def is_readable_directory(self, path: str) -> bool:
        """
        Check whether a path is a directory the process can enumerate and enter.

        Args:
            path: Path to check

        Returns:
            True if the path is a directory with read and search permission
        """
        pass

    @abstractmethod
    def read_lines(self, path: str) -> Iterator[str]:
        """
        Stream a text file line by line.

        Args:
            path: Path to the file to read

        Returns:
            Iterator over lines, without trailing newlines

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        pass

    @abstractmethod
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
        pass
