"""
Use case for turning a raw input line into a Command.
"""

import logging
from typing import Optional

from file_navigator.entities.command import Command, CommandKind
from file_navigator.exceptions import EmptyInputError, UnrecognizedCommandError


class ParseCommandUseCase:
    """Classify an input line into one of the known command kinds."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, raw_line: str) -> Command:
        """
        Parse a raw input line.

        The first whitespace-separated token picks the kind by case-insensitive
        prefix, trying kinds in declaration order. The second token, if any, is
        the argument; anything after it is ignored.

        Args:
            raw_line: Line as typed by the user

        Returns:
            The parsed Command

        Raises:
            EmptyInputError: If the line is blank
            UnrecognizedCommandError: If no command keyword matches
        """
        tokens = raw_line.split()
        if not tokens:
            raise EmptyInputError("Type something...")

        for kind in CommandKind:
            if kind.accepts(tokens[0]):
                argument = tokens[1] if len(tokens) > 1 else None
                command = Command(kind, argument)
                self._logger.debug(f"Parsed command: {command}")
                return command

        raise UnrecognizedCommandError(f"Can't parse command [{raw_line.strip()}]")
