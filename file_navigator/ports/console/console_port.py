"""
Console ports: the line source and line sink the browse session talks to.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ConsoleInputPort(ABC):
    @abstractmethod
    def read_line(self, prompt: str = "") -> Optional[str]:
        """
        Read the next line of input.

        Returns:
            The line without its newline, or None when input has ended
        """
        pass


class ConsoleOutputPort(ABC):
    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Print one line of plain text."""
        pass

    @abstractmethod
    def write_error(self, text: str) -> None:
        """Print one line reporting a failed command."""
        pass
