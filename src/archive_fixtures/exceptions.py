"""Custom exceptions for fixture generation."""

from pathlib import Path


class FixtureError(Exception):
    """Base exception for all fixture generation errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InputError(FixtureError):
    """Raised when console input cannot be interpreted."""

    pass


class FilesystemError(FixtureError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, message: str, path: Path | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)


class SerializationError(FixtureError):
    """Raised when a document cannot be serialized or written to disk."""

    def __init__(self, message: str, path: Path | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
