"""
Use case for the LIST command.
"""

import logging
from typing import Optional

from file_navigator.exceptions import FileRepositoryError, ReadError
from file_navigator.ports.console.console_port import ConsoleOutputPort
from file_navigator.ports.files.file_repository_port import FileRepositoryPort


class ListDirectoryUseCase:
    """Print the name of every entry of the current directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        output: ConsoleOutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            output: Where entry names are printed
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, current_path: str) -> str:
        """
        List the current directory.

        Args:
            current_path: The cursor

        Returns:
            The unchanged cursor

        Raises:
            ReadError: If the directory cannot be enumerated
        """
        try:
            self._logger.info(f"Listing directory: {current_path}")
            names = self._file_repository.list_names(current_path)
        except FileRepositoryError as e:
            self._logger.error(f"Error listing directory: {e}")
            raise ReadError(str(e)) from e

        for name in names:
            self._output.write_line(name)
        self._logger.info(f"Found {len(names)} entries")
        return current_path
