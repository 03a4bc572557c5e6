"""
Use case dispatching a parsed Command to the use case that implements it.
"""

import logging
from typing import Optional

from file_navigator.entities.command import Command, CommandKind, CommandOutcome
from file_navigator.ports.console.console_port import ConsoleOutputPort
from file_navigator.use_cases.navigation.detail_entry import DetailEntryUseCase
from file_navigator.use_cases.navigation.go_back import GoBackUseCase
from file_navigator.use_cases.navigation.list_directory import ListDirectoryUseCase
from file_navigator.use_cases.navigation.open_folder import OpenFolderUseCase
from file_navigator.use_cases.navigation.show_file import ShowFileUseCase

FAREWELL_MESSAGE = "Exiting..."


class ExecuteCommandUseCase:
    """Run one command against the cursor and return the next cursor."""

    def __init__(
        self,
        list_directory: ListDirectoryUseCase,
        show_file: ShowFileUseCase,
        open_folder: OpenFolderUseCase,
        detail_entry: DetailEntryUseCase,
        go_back: GoBackUseCase,
        output: ConsoleOutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            list_directory: Handles LIST
            show_file: Handles SHOW
            open_folder: Handles OPEN
            detail_entry: Handles DETAIL
            go_back: Handles BACK
            output: Where the farewell message is printed
            logger: Logger instance to use for logging
        """
        self._list_directory = list_directory
        self._show_file = show_file
        self._open_folder = open_folder
        self._detail_entry = detail_entry
        self._go_back = go_back
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: Command, current_path: str, root: str) -> CommandOutcome:
        """
        Execute a command.

        Args:
            command: The parsed command
            current_path: The cursor
            root: Top of navigable space

        Returns:
            The next cursor and whether the session should stop

        Raises:
            CommandError: Any subclass, when a precondition or read fails
        """
        self._logger.info(f"Executing {command} in {current_path}")
        match command.kind:
            case CommandKind.LIST:
                return CommandOutcome(self._list_directory.execute(current_path))
            case CommandKind.SHOW:
                return CommandOutcome(
                    self._show_file.execute(command.argument, current_path)
                )
            case CommandKind.OPEN:
                return CommandOutcome(
                    self._open_folder.execute(command.argument, current_path)
                )
            case CommandKind.DETAIL:
                return CommandOutcome(
                    self._detail_entry.execute(command.argument, current_path)
                )
            case CommandKind.BACK:
                return CommandOutcome(self._go_back.execute(current_path, root))
            case CommandKind.EXIT:
                self._output.write_line(FAREWELL_MESSAGE)
                return CommandOutcome(current_path, should_stop=True)
        raise ValueError(f"Unhandled command kind: {command.kind}")
