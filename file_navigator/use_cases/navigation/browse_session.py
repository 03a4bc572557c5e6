"""
Use case running the interactive read-parse-execute loop.
"""

import logging
from typing import Optional

from file_navigator.entities.command import CommandKind, CommandOutcome
from file_navigator.exceptions import CommandError
from file_navigator.ports.console.console_port import ConsoleInputPort, ConsoleOutputPort
from file_navigator.use_cases.navigation.execute_command import ExecuteCommandUseCase
from file_navigator.use_cases.navigation.parse_command import ParseCommandUseCase


class BrowseSessionUseCase:
    """Own the cursor and drive commands until EXIT or end of input."""

    def __init__(
        self,
        parse_command: ParseCommandUseCase,
        execute_command: ExecuteCommandUseCase,
        console_input: ConsoleInputPort,
        output: ConsoleOutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._parse_command = parse_command
        self._execute_command = execute_command
        self._input = console_input
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    def _print_banner(self, root: str) -> None:
        keywords = ", ".join(kind.keyword for kind in CommandKind)
        self._output.write_line(f"Browsing {root}")
        self._output.write_line(f"Commands: {keywords}")

    def step(self, raw_line: str, current_path: str, root: str) -> CommandOutcome:
        """
        Handle one input line.

        Returns:
            The next cursor and whether to stop. On a command failure the
            message is printed and the cursor is returned unchanged.
        """
        try:
            command = self._parse_command.execute(raw_line)
            outcome = self._execute_command.execute(command, current_path, root)
        except CommandError as e:
            self._logger.warning(f"{type(e).__name__}: {e}")
            self._output.write_error(str(e))
            return CommandOutcome(current_path)
        return outcome

    def run(self, root: str) -> str:
        """
        Run the session starting at ``root``.

        Args:
            root: Initial cursor and the boundary BACK cannot cross

        Returns:
            The cursor when the session ended
        """
        self._logger.info(f"Starting session at {root}")
        self._print_banner(root)

        current_path = root
        while True:
            raw_line = self._input.read_line(f"{current_path}> ")
            if raw_line is None:
                self._logger.info("Input ended")
                break
            outcome = self.step(raw_line, current_path, root)
            current_path = outcome.path
            if outcome.should_stop:
                break

        self._logger.info(f"Session ended at {current_path}")
        return current_path
