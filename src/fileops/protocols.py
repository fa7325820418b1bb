"""Protocol definitions for core abstractions.

The :class:`FileSystem` protocol is the only seam between
:class:`fileops.operations.FileOperations` and the disk. Designing to this
interface enables:
- Substitution of test doubles for OS failure paths
- Clear contracts for alternative implementations

Implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from fileops.types import PathLike

__all__ = ["FileSystem"]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem primitives.

    Methods raise ``OSError`` (or a subclass) on failure; translating those
    into :mod:`fileops.errors` is the caller's job.
    """

    def read_text(self, path: PathLike, encoding: str = "utf-8") -> str:
        """Read the full text content of a file.

        Args:
            path: Path to the file.
            encoding: Text encoding.

        Returns:
            File content as string, newlines untranslated.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_text(self, path: PathLike, content: str, encoding: str = "utf-8") -> None:
        """Truncate a file and write text content to it.

        Args:
            path: Path to the file.
            content: Content to write.
            encoding: Text encoding.
        """
        ...

    def exists(self, path: PathLike) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check. An empty path never exists.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_symlink(self, path: PathLike) -> bool:
        """Check if a path is a symbolic link.

        Args:
            path: Path to check.

        Returns:
            True if path is a symbolic link, False otherwise.
        """
        ...

    def mkdir(
        self,
        path: PathLike,
        mode: int = 0o777,
        parents: bool = False,
        exist_ok: bool = False,
    ) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            mode: Permission bits, subject to the process umask.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def iterdir(self, path: PathLike) -> list[Path]:
        """List the entries of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry paths, without the ``.`` and ``..`` pseudo-entries.
        """
        ...

    def unlink(self, path: PathLike) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...

    def rmdir(self, path: PathLike) -> None:
        """Remove an empty directory.

        Args:
            path: Path to remove.
        """
        ...

    def copy_file(self, src: PathLike, dst: PathLike) -> None:
        """Copy file content byte for byte, overwriting the destination.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...
