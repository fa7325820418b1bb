"""Filesystem primitives.

The RealFileSystem implementation wraps standard library operations and
satisfies the FileSystem protocol. It never translates errors: ``OSError``
propagates to the caller.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from fileops.types import PathLike


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os, Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def read_text(self, path: PathLike, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: PathLike, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

    def exists(self, path: PathLike) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def is_symlink(self, path: PathLike) -> bool:
        """Check if a path is a symbolic link."""
        return os.path.islink(path)

    def mkdir(
        self,
        path: PathLike,
        mode: int = 0o777,
        parents: bool = False,
        exist_ok: bool = False,
    ) -> None:
        """Create a directory."""
        Path(path).mkdir(mode=mode, parents=parents, exist_ok=exist_ok)

    def iterdir(self, path: PathLike) -> list[Path]:
        """List the entries of a directory."""
        return sorted(Path(path).iterdir())

    def unlink(self, path: PathLike) -> None:
        """Remove a file."""
        os.unlink(path)

    def rmdir(self, path: PathLike) -> None:
        """Remove an empty directory."""
        os.rmdir(path)

    def copy_file(self, src: PathLike, dst: PathLike) -> None:
        """Copy file content."""
        shutil.copyfile(src, dst)
