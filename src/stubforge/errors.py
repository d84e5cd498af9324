"""Custom exception types raised by the stubforge core."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Machine readable category attached to every :class:`StubforgeError`."""

    TEMPLATE_NOT_FOUND = "template_not_found"
    TEMPLATE_READ_ERROR = "template_read_error"
    DESTINATION_EXISTS = "destination_exists"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    WRITE_FAILED = "write_failed"


class StubforgeError(RuntimeError):
    """Base class for failures reported by the store, compiler and writer."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TemplateNotFound(StubforgeError):
    """Raised when no template file backs the requested stub name."""

    kind = ErrorKind.TEMPLATE_NOT_FOUND

    def __init__(self, stub_name: str) -> None:
        self.stub_name = stub_name
        super().__init__(f"Stub not found: {stub_name}")


class TemplateReadError(StubforgeError):
    """Raised when a template exists but its contents cannot be read."""

    kind = ErrorKind.TEMPLATE_READ_ERROR

    def __init__(self, stub_name: str, path: Path) -> None:
        self.stub_name = stub_name
        self.path = path
        super().__init__(f"Could not read stub: {stub_name} ({path})")


class DestinationAlreadyExists(StubforgeError):
    """Raised when writing onto an existing path without overwrite enabled."""

    kind = ErrorKind.DESTINATION_EXISTS

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File already exists: {path}")


class DirectoryCreateFailed(StubforgeError):
    """Raised when the destination directory could not be created."""

    kind = ErrorKind.DIRECTORY_CREATE_FAILED

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not create directory: {path}")


class WriteFailed(StubforgeError):
    """Raised when the content write itself fails."""

    kind = ErrorKind.WRITE_FAILED

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Could not write file: {path}")


__all__ = [
    "DestinationAlreadyExists",
    "DirectoryCreateFailed",
    "ErrorKind",
    "StubforgeError",
    "TemplateNotFound",
    "TemplateReadError",
    "WriteFailed",
]
