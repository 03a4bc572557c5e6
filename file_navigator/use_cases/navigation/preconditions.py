"""
Precondition checks shared by the commands that take a file or folder name.
"""

from file_navigator.entities.command import CommandKind
from file_navigator.exceptions import (
    FileRepositoryError,
    MissingArgumentError,
    ReadError,
)
from file_navigator.ports.files.file_repository_port import FileRepositoryPort

_EXAMPLES = {
    CommandKind.SHOW: "notes.txt",
    CommandKind.OPEN: "archive",
    CommandKind.DETAIL: "notes.txt",
}


def require_argument(kind: CommandKind, argument: str | None) -> str:
    """Return the argument, or raise MissingArgumentError naming an example."""
    if argument is None:
        example = f"{kind.keyword} {_EXAMPLES.get(kind, 'name')}"
        raise MissingArgumentError(
            f"{kind.keyword} command needs an input. Example: '{example}'. Try again."
        )
    return argument


def entry_exists(file_repository: FileRepositoryPort, directory: str, name: str) -> bool:
    """Fresh membership check; an unreadable directory surfaces as ReadError."""
    try:
        return file_repository.has_entry(directory, name)
    except FileRepositoryError as e:
        raise ReadError(str(e)) from e
