"""Thin wrapper over file and directory primitives."""

__version__ = "0.1.0"

from fileops.config import FileOperationsConfig
from fileops.errors import (
    AlreadyExistsError,
    CopyFailedError,
    CreateFailedError,
    DeleteFailedError,
    ErrorKind,
    FileOperationError,
    InvalidPathError,
    InvalidPlaceholderFormatError,
    MissingParentError,
    NotDirectoryError,
    NotFoundError,
    RemoveFailedError,
    WriteFailedError,
)
from fileops.operations import FileOperations
from fileops.protocols import FileSystem

__all__ = [
    "__version__",
    "AlreadyExistsError",
    "CopyFailedError",
    "CreateFailedError",
    "DeleteFailedError",
    "ErrorKind",
    "FileOperationError",
    "FileOperations",
    "FileOperationsConfig",
    "FileSystem",
    "InvalidPathError",
    "InvalidPlaceholderFormatError",
    "MissingParentError",
    "NotDirectoryError",
    "NotFoundError",
    "RemoveFailedError",
    "WriteFailedError",
]
