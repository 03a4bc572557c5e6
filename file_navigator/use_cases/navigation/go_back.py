"""
Use case for the BACK command.
"""

import logging
from typing import Optional

from file_navigator.exceptions import AtRootError
from file_navigator.ports.console.console_port import ConsoleOutputPort
from file_navigator.utils.paths import is_root, parent_of


class GoBackUseCase:
    """Move the cursor to its parent, never above the configured root."""

    def __init__(
        self,
        output: ConsoleOutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, current_path: str, root: str) -> str:
        if is_root(current_path, root):
            raise AtRootError("Cannot go back! The application is already on its root.")

        parent = parent_of(current_path)
        self._logger.info(f"Moved back to: {parent}")
        self._output.write_line(f"Printing new path: {parent}")
        return parent
