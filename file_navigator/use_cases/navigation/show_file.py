"""
Use case for the SHOW command.
"""

import logging
from typing import Optional

from file_navigator.entities.command import CommandKind
from file_navigator.exceptions import FileRepositoryError, InvalidTargetError, ReadError
from file_navigator.ports.console.console_port import ConsoleOutputPort
from file_navigator.ports.files.file_repository_port import FileRepositoryPort
from file_navigator.use_cases.navigation.preconditions import (
    entry_exists,
    require_argument,
)
from file_navigator.utils.paths import has_extension, join_child


class ShowFileUseCase:
    """Stream a file of the current directory to the output."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        output: ConsoleOutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, argument: Optional[str], current_path: str) -> str:
        """
        Print the contents of a file.

        The name must carry a three-letter extension and be a direct entry of
        ``current_path``.

        Returns:
            The unchanged cursor

        Raises:
            MissingArgumentError: If no file name was given
            InvalidTargetError: If the name has no extension or is not in the directory
            ReadError: If the file cannot be read
        """
        file_name = require_argument(CommandKind.SHOW, argument)

        if not has_extension(file_name) or not entry_exists(
            self._file_repository, current_path, file_name
        ):
            raise InvalidTargetError(
                "The file cannot be a folder and should be contained in the directory. Try again."
            )

        target = join_child(current_path, file_name)
        self._logger.info(f"Showing file: {target}")
        try:
            for line in self._file_repository.read_lines(target):
                self._output.write_line(line)
        except FileRepositoryError as e:
            self._logger.error(f"Error showing file: {e}")
            raise ReadError(str(e)) from e
        return current_path
