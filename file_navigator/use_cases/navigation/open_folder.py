"""
Use case for the OPEN command.
"""

import logging
from typing import Optional

from file_navigator.entities.command import CommandKind
from file_navigator.exceptions import InvalidTargetError
from file_navigator.ports.console.console_port import ConsoleOutputPort
from file_navigator.ports.files.file_repository_port import FileRepositoryPort
from file_navigator.use_cases.navigation.preconditions import (
    entry_exists,
    require_argument,
)
from file_navigator.utils.paths import has_extension, join_child


class OpenFolderUseCase:
    """Move the cursor into a sub-folder of the current directory."""

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
        Open a folder.

        Returns:
            The folder's path, which becomes the new cursor

        Raises:
            MissingArgumentError: If no folder name was given
            InvalidTargetError: If the name looks like a file, is not in the
                directory, or is not a readable directory
        """
        folder_name = require_argument(CommandKind.OPEN, argument)

        if has_extension(folder_name) or not entry_exists(
            self._file_repository, current_path, folder_name
        ):
            raise InvalidTargetError(
                "The destination cannot be a file, should be a folder contained in the actual directory. Try again."
            )

        new_path = join_child(current_path, folder_name)
        # Extension-less files (README, Makefile) pass the name check above.
        if not self._file_repository.is_directory(new_path):
            raise InvalidTargetError(
                "The destination should be a folder, not a file without extension. Try again."
            )
        if not self._file_repository.is_readable_directory(new_path):
            raise InvalidTargetError(
                "The destination folder cannot be read. Check its permissions and try again."
            )

        self._logger.info(f"Opened folder: {new_path}")
        self._output.write_line(new_path)
        return new_path
