"""
Command domain entities.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandKind(Enum):
    """Closed set of navigator commands, in matching order."""

    LIST = "LIST"
    SHOW = "SHOW"
    OPEN = "OPEN"
    DETAIL = "DETAIL"
    BACK = "BACK"
    EXIT = "EXIT"

    @property
    def keyword(self) -> str:
        return self.value

    def accepts(self, token: str) -> bool:
        """Return True if the token starts with this kind's keyword, ignoring case."""
        return token.upper().startswith(self.keyword)


@dataclass(frozen=True)
class Command:
    """A parsed command: its kind and the optional file or folder name after it."""

    kind: CommandKind
    argument: Optional[str] = None

    def has_argument(self) -> bool:
        return self.argument is not None

    def __str__(self) -> str:
        if self.argument is None:
            return self.kind.keyword
        return f"{self.kind.keyword} {self.argument}"


@dataclass(frozen=True)
class CommandOutcome:
    """Result of executing a command: the next cursor and whether the session ends."""

    path: str
    should_stop: bool = False
