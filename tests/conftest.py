"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from typing import Optional
from unittest.mock import MagicMock

import pytest

from file_navigator.container import DependencyContainer
from file_navigator.ports.console.console_port import ConsoleInputPort, ConsoleOutputPort


class RecordingConsole(ConsoleInputPort, ConsoleOutputPort):
    """Console fake: serves scripted input lines and records everything printed."""

    def __init__(self, lines: Optional[list[str]] = None):
        self.pending = list(lines or [])
        self.prompts: list[str] = []
        self.lines: list[str] = []
        self.errors: list[str] = []

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        if not self.pending:
            return None
        return self.pending.pop(0)

    def write_line(self, text: str = "") -> None:
        self.lines.append(text)

    def write_error(self, text: str) -> None:
        self.errors.append(text)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing navigation.

    Layout:
        notes.txt        text file with two lines
        README           file without extension
        photo.jpeg       four-letter extension
        archive/         folder
        archive/old.log  file inside the folder

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "notes.txt"), "w") as f:
            f.write("first line\nsecond line\n")

        with open(os.path.join(temp_dir, "README"), "w") as f:
            f.write("read me")

        with open(os.path.join(temp_dir, "photo.jpeg"), "wb") as f:
            f.write(b"\xff\xd8\xff")

        archive = os.path.join(temp_dir, "archive")
        os.makedirs(archive)

        with open(os.path.join(archive, "old.log"), "w") as f:
            f.write("old entry")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def recording_console():
    """Console fake with no scripted input."""
    return RecordingConsole()


@pytest.fixture
def dependency_container(mock_logger, recording_console):
    """
    Create a dependency container with a mocked logger and a recording console.

    Returns:
        DependencyContainer instance
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    container.set_console(recording_console)
    return container
