"""
Console adapter backed by rich.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.text import Text
from typing_extensions import override

from file_navigator.ports.console.console_port import ConsoleInputPort, ConsoleOutputPort


class RichConsoleAdapter(ConsoleInputPort, ConsoleOutputPort):
    """Reads commands from and prints results to a rich Console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            console: Console to use; a stdout console is created if None
            logger: Logger instance to use for logging
        """
        self._console = console or Console()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def console(self) -> Console:
        return self._console

    @override
    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return self._console.input(Text(prompt, style="cyan"))
        except EOFError:
            self._console.print()
            return None
        except KeyboardInterrupt:
            self._console.print()
            self._logger.info("Input interrupted by user")
            return None

    @override
    def write_line(self, text: str = "") -> None:
        # File names and file content must not be parsed as rich markup.
        self._console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    @override
    def write_error(self, text: str) -> None:
        self._console.print(Text(text, style="red"), soft_wrap=True)
