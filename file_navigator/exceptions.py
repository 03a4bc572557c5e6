"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandError(BaseAppError):
    """Base class for failures of a single command; the session reports them and keeps going."""

    pass


class EmptyInputError(CommandError):
    """Exception raised when the input line is blank."""

    pass


class UnrecognizedCommandError(CommandError):
    """Exception raised when the first token matches no known command."""

    pass


class MissingArgumentError(CommandError):
    """Exception raised when a command needs a file or folder name and got none."""

    pass


class InvalidTargetError(CommandError):
    """Exception raised when the named entry is absent or of the wrong kind."""

    pass


class AtRootError(CommandError):
    """Exception raised when navigating back from the configured root."""

    pass


class ReadError(CommandError):
    """Exception raised when the file system cannot be read for a command."""

    pass
