"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from file_navigator.exceptions import ConfigurationError
from file_navigator.utils.paths import normalize_dir

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, root: Optional[str] = None, log_level: Optional[str] = None):
        """
        Args:
            root: Overrides FILE_NAVIGATOR_ROOT when given
            log_level: Overrides FILE_NAVIGATOR_LOG_LEVEL when given
        """
        self.root: str = normalize_dir(
            root or self._get_env("FILE_NAVIGATOR_ROOT", os.getcwd())
        )
        self.log_level: str = (
            log_level or self._get_env("FILE_NAVIGATOR_LOG_LEVEL", "WARNING")
        ).upper()

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def validate_root(self) -> str:
        """Return the root, raising ConfigurationError unless it is a readable directory."""
        if not os.path.exists(self.root):
            raise ConfigurationError(f"Root directory does not exist: {self.root}")
        if not os.path.isdir(self.root):
            raise ConfigurationError(f"Root is not a directory: {self.root}")
        if not os.access(self.root, os.R_OK | os.X_OK):
            raise ConfigurationError(f"Root directory is not readable: {self.root}")
        return self.root

    def logging_level(self) -> int:
        """Numeric logging level for ``log_level``."""
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        return level
