"""
Use case for the DETAIL command.
"""

import logging
from typing import Optional

from file_navigator.entities.command import CommandKind
from file_navigator.exceptions import FileRepositoryError, InvalidTargetError
from file_navigator.ports.console.console_port import ConsoleOutputPort
from file_navigator.ports.files.file_repository_port import FileRepositoryPort
from file_navigator.use_cases.navigation.preconditions import (
    entry_exists,
    require_argument,
)
from file_navigator.utils.paths import join_child


class DetailEntryUseCase:
    """Print the attributes of a file or folder in the current directory."""

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
        Report is-directory, size, creation and last-access time of an entry.

        A failure to read the attributes is logged and reported here; it does
        not reach the session loop.

        Returns:
            The unchanged cursor

        Raises:
            MissingArgumentError: If no name was given
            InvalidTargetError: If the name is not in the directory
        """
        name = require_argument(CommandKind.DETAIL, argument)

        if not entry_exists(self._file_repository, current_path, name):
            raise InvalidTargetError(
                "The file/folder should exist in the current directory. Try again."
            )

        target = join_child(current_path, name)
        try:
            entry = self._file_repository.get_details(target)
        except FileRepositoryError as e:
            self._logger.error(f"Error reading attributes: {e}")
            self._output.write_error(f"Cannot read attributes of {name}: {e}")
            return current_path

        for line in entry.describe():
            self._output.write_line(line)
        return current_path
