"""
Dependency injection container for managing application dependencies.
"""

import logging

from file_navigator.adapters.console.rich_console_adapter import RichConsoleAdapter
from file_navigator.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_navigator.ports.files.file_repository_port import FileRepositoryPort
from file_navigator.use_cases.navigation.browse_session import BrowseSessionUseCase
from file_navigator.use_cases.navigation.detail_entry import DetailEntryUseCase
from file_navigator.use_cases.navigation.execute_command import ExecuteCommandUseCase
from file_navigator.use_cases.navigation.go_back import GoBackUseCase
from file_navigator.use_cases.navigation.list_directory import ListDirectoryUseCase
from file_navigator.use_cases.navigation.open_folder import OpenFolderUseCase
from file_navigator.use_cases.navigation.parse_command import ParseCommandUseCase
from file_navigator.use_cases.navigation.show_file import ShowFileUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_console(self) -> RichConsoleAdapter:
        """
        Get the console adapter, used both as input and output port.

        Returns:
            RichConsoleAdapter instance
        """
        if "console" not in self._instances:
            self._instances["console"] = RichConsoleAdapter(logger=self._logger)
        return self._instances["console"]

    def set_console(self, console: RichConsoleAdapter) -> None:
        """Replace the console adapter (e.g. one built with colors disabled)."""
        self._instances["console"] = console

    def get_parse_command_use_case(self) -> ParseCommandUseCase:
        """
        Get parse command use case.

        Returns:
            Configured ParseCommandUseCase
        """
        if "parse_command_use_case" not in self._instances:
            self._instances["parse_command_use_case"] = ParseCommandUseCase(
                self._logger
            )
        return self._instances["parse_command_use_case"]

    def get_execute_command_use_case(self) -> ExecuteCommandUseCase:
        """
        Get execute command use case with injected dependencies.

        Returns:
            Configured ExecuteCommandUseCase
        """
        if "execute_command_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            output = self.get_console()
            self._instances["execute_command_use_case"] = ExecuteCommandUseCase(
                ListDirectoryUseCase(file_repository, output, self._logger),
                ShowFileUseCase(file_repository, output, self._logger),
                OpenFolderUseCase(file_repository, output, self._logger),
                DetailEntryUseCase(file_repository, output, self._logger),
                GoBackUseCase(output, self._logger),
                output,
                self._logger,
            )
        return self._instances["execute_command_use_case"]

    def get_browse_session_use_case(self) -> BrowseSessionUseCase:
        """
        Get browse session use case with injected dependencies.

        Returns:
            Configured BrowseSessionUseCase
        """
        if "browse_session_use_case" not in self._instances:
            console = self.get_console()
            self._instances["browse_session_use_case"] = BrowseSessionUseCase(
                self.get_parse_command_use_case(),
                self.get_execute_command_use_case(),
                console,
                console,
                self._logger,
            )
        return self._instances["browse_session_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
