"""
File domain entity.
"""

import os
from datetime import datetime, timezone
from stat import S_ISDIR
from typing import Any

from file_navigator.exceptions import FileRepositoryError


def _format_timestamp(timestamp: float) -> str:
    """Render a POSIX timestamp as ISO-8601 UTC with a trailing 'Z'."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat().replace("+00:00", "Z")


class File:
    """
    File system entry entity (file or directory) holding a fresh snapshot of its attributes.
    """

    def __init__(self, path: str):
        """
        Initialize the File entity by reading the entry's attributes.

        Args:
            path: Path to the file or directory

        Raises:
            FileRepositoryError: If path is invalid or its attributes cannot be read
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)

        try:
            stat = os.stat(self.path)
        except FileNotFoundError:
            raise FileRepositoryError(f"File does not exist: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Cannot read attributes of {self.path}: {e}")

        self.is_dir = S_ISDIR(stat.st_mode)
        self.size: int = stat.st_size
        # st_birthtime only exists on some platforms (macOS, BSD, recent Windows)
        self.created_at: float = getattr(stat, "st_birthtime", stat.st_ctime)
        self.accessed_at: float = stat.st_atime

    def get_details(self) -> dict[str, Any]:
        """
        Get the attributes reported by the DETAIL command.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "is_directory": self.is_dir,
            "size": self.size,
            "created_on": _format_timestamp(self.created_at),
            "last_access_time": _format_timestamp(self.accessed_at),
        }

    def describe(self) -> list[str]:
        """Human-readable report lines, ending with a blank separator line."""
        details = self.get_details()
        return [
            f"Is directory: {str(details['is_directory']).lower()}",
            f"Size: {details['size']}",
            f"Created on: {details['created_on']}",
            f"Last access time: {details['last_access_time']}",
            "",
        ]

    def __str__(self) -> str:
        """String representation of the File."""
        return f"File(name='{self.name}', size={self.size}, is_dir={self.is_dir})"

    def __repr__(self) -> str:
        """Detailed string representation of the File."""
        return f"File(path='{self.path}')"
