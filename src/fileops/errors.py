"""Error taxonomy for file operations.

Every failure raised by :class:`fileops.operations.FileOperations` is a
:class:`FileOperationError` subclass carrying an :class:`ErrorKind`, so callers
can either catch a specific class or branch on ``error.kind``.
"""

from __future__ import annotations

import os
from enum import Enum

__all__ = [
    "AlreadyExistsError",
    "CopyFailedError",
    "CreateFailedError",
    "DeleteFailedError",
    "ErrorKind",
    "FileOperationError",
    "InvalidPathError",
    "InvalidPlaceholderFormatError",
    "MissingParentError",
    "NotDirectoryError",
    "NotFoundError",
    "RemoveFailedError",
    "WriteFailedError",
]


class ErrorKind(str, Enum):
    """Failure modes reported by file operations."""

    INVALID_PATH = "invalid_path"
    MISSING_PARENT = "missing_parent"
    CREATE_FAILED = "create_failed"
    WRITE_FAILED = "write_failed"
    DELETE_FAILED = "delete_failed"
    COPY_FAILED = "copy_failed"
    REMOVE_FAILED = "remove_failed"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    NOT_DIRECTORY = "not_directory"
    INVALID_FORMAT = "invalid_format"


class FileOperationError(Exception):
    """Base error for file operations.

    Attributes:
        kind: The failure mode.
        path: The path the operation failed on, if any.
    """

    kind: ErrorKind

    def __init__(self, message: str, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidPathError(FileOperationError):
    """A directory path was empty or not a string."""

    kind = ErrorKind.INVALID_PATH


class MissingParentError(FileOperationError):
    """The parent of a directory to create does not exist."""

    kind = ErrorKind.MISSING_PARENT


class CreateFailedError(FileOperationError):
    """Creating a directory failed."""

    kind = ErrorKind.CREATE_FAILED


class WriteFailedError(FileOperationError):
    """Writing file content failed."""

    kind = ErrorKind.WRITE_FAILED


class DeleteFailedError(FileOperationError):
    """Deleting a file failed."""

    kind = ErrorKind.DELETE_FAILED


class CopyFailedError(FileOperationError):
    """Copying a file failed."""

    kind = ErrorKind.COPY_FAILED


class RemoveFailedError(FileOperationError):
    """Removing a directory failed."""

    kind = ErrorKind.REMOVE_FAILED


class NotFoundError(FileOperationError):
    """A path that must exist does not.

    Unlike the other errors the path comes first, and the message is
    keyword-only: ``NotFoundError(path, message="...")``. Without a message
    a default naming the path is used.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str | os.PathLike[str], *, message: str = "") -> None:
        if not message:
            message = f"File ({os.fspath(path)}) not found."
        super().__init__(message, path)


class AlreadyExistsError(FileOperationError):
    """A path that must be absent already exists."""

    kind = ErrorKind.ALREADY_EXISTS


class NotDirectoryError(FileOperationError):
    """The target of a recursive removal is not an existing directory."""

    kind = ErrorKind.NOT_DIRECTORY


class InvalidPlaceholderFormatError(FileOperationError, ValueError):
    """A placeholder format does not have exactly one substitution slot."""

    kind = ErrorKind.INVALID_FORMAT
