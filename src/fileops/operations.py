"""File and directory operations facade."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from fileops.config import FileOperationsConfig
from fileops.errors import (
    AlreadyExistsError,
    CopyFailedError,
    CreateFailedError,
    DeleteFailedError,
    InvalidPathError,
    MissingParentError,
    NotDirectoryError,
    NotFoundError,
    RemoveFailedError,
    WriteFailedError,
)
from fileops.protocols import FileSystem
from fileops.template import DEFAULT_PLACEHOLDER_FORMAT, replace_placeholders, validate_format
from fileops.types import PathLike, PathPair

logger = logging.getLogger(__name__)


class FileOperations:
    """A thin wrapper around file and directory primitives.

    Holds a source and a destination path that operations fall back to when
    called without explicit paths. Setters return the instance for chaining::

        ops = FileOperations()
        ops.set_destination_path("out.txt").create_file("hello")

    Every call is synchronous and holds no handle once it returns. Existence
    checks and the writes that follow them are not atomic.
    """

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        config: FileOperationsConfig | None = None,
    ) -> None:
        """Initialize the facade.

        Args:
            filesystem: Filesystem implementation. Defaults to RealFileSystem.
            config: Settings. Defaults to FileOperationsConfig().
        """
        if filesystem is None:
            from fileops.filesystem import RealFileSystem

            filesystem = RealFileSystem()
        self.filesystem = filesystem
        self.config = config or FileOperationsConfig()
        self.paths = PathPair()

    @property
    def source_path(self) -> PathLike:
        """Configured source path."""
        return self.paths.source

    @property
    def destination_path(self) -> PathLike:
        """Configured destination path."""
        return self.paths.destination

    def set_source_path(self, path: PathLike) -> FileOperations:
        """Set the source path.

        Args:
            path: Path read from when no override is given. Stored verbatim.

        Returns:
            This instance for method chaining.
        """
        self.paths = self.paths.with_source(path)
        return self

    def set_destination_path(self, path: PathLike) -> FileOperations:
        """Set the destination path.

        Args:
            path: Path written to when no override is given. Stored verbatim.

        Returns:
            This instance for method chaining.
        """
        self.paths = self.paths.with_destination(path)
        return self

    # ========================================================================
    # Directories
    # ========================================================================

    def create_directories(self, paths: PathLike | Iterable[PathLike]) -> FileOperations:
        """Create directories that do not exist yet.

        Args:
            paths: A single directory path or an ordered collection of paths.

        Returns:
            This instance for method chaining.

        Raises:
            InvalidPathError: If a path is empty or not a string.
            MissingParentError: If the parent directory is unavailable.
            CreateFailedError: If creating a directory fails.
        """
        if isinstance(paths, (str, os.PathLike)) or not isinstance(paths, Iterable):
            paths = [paths]

        for directory in paths:
            self._check_directory_path(directory)
            self._check_parent(directory)

            if self.filesystem.is_dir(directory):
                continue

            try:
                self.filesystem.mkdir(
                    directory,
                    mode=self.config.directory_mode,
                    parents=True,
                    exist_ok=True,
                )
            except OSError as e:
                raise CreateFailedError(
                    f"Failed to create directory: {os.fspath(directory)}", directory
                ) from e
            logger.debug("Created directory %s", directory)

        return self

    def _check_directory_path(self, directory: object) -> None:
        if isinstance(directory, os.PathLike):
            directory = os.fspath(directory)
        if not isinstance(directory, str) or not directory:
            raise InvalidPathError(f"Invalid directory path provided: {directory!r}", None)

    def _check_parent(self, directory: PathLike) -> None:
        """Fail fast when the parent directory is unavailable.

        With ``create_parents`` the nearest existing ancestor must be a
        directory; without it the immediate parent must be one.
        """
        parent = Path(directory).parent
        if not self.config.create_parents:
            if not self.filesystem.is_dir(parent):
                raise MissingParentError(f"Parent directory does not exist: {parent}", parent)
            return

        while not self.filesystem.exists(parent) and parent != parent.parent:
            parent = parent.parent
        if not self.filesystem.is_dir(parent):
            raise MissingParentError(f"Parent directory does not exist: {parent}", parent)

    def remove_directory_recursive(self, path: PathLike | None = None) -> FileOperations:
        """Remove a directory and everything beneath it.

        Children are removed best effort: a file that cannot be unlinked is
        skipped and only logged. The directory itself must be removed, so a
        skipped file surfaces as a RemoveFailedError on its parent. The tree
        is not locked while it is traversed.

        Args:
            path: Directory to remove. Defaults to the configured source path.

        Returns:
            This instance for method chaining.

        Raises:
            NotDirectoryError: If the path is not an existing directory.
            RemoveFailedError: If a directory cannot be removed.
        """
        directory = self.paths.source if path is None else path

        if not self.filesystem.is_dir(directory):
            raise NotDirectoryError(
                f"Directory ({os.fspath(directory)}) does not exist", directory
            )

        try:
            entries = self.filesystem.iterdir(directory)
        except OSError as e:
            raise RemoveFailedError(
                f"Failed to remove directory ({os.fspath(directory)})", directory
            ) from e

        for entry in entries:
            if self.filesystem.is_dir(entry) and not self.filesystem.is_symlink(entry):
                self.remove_directory_recursive(entry)
                continue
            try:
                self.filesystem.unlink(entry)
            except OSError as e:
                logger.debug("Skipping %s, unlink failed: %s", entry, e)

        try:
            self.filesystem.rmdir(directory)
        except OSError as e:
            raise RemoveFailedError(
                f"Failed to remove directory ({os.fspath(directory)})", directory
            ) from e
        logger.debug("Removed directory %s", directory)

        return self

    # ========================================================================
    # Files
    # ========================================================================

    def create_file(self, content: str, destination_path: PathLike | None = None) -> FileOperations:
        """Create a new file with the given content.

        Args:
            content: The full file body.
            destination_path: Override for the configured destination path.

        Returns:
            This instance for method chaining.

        Raises:
            AlreadyExistsError: If the destination already exists.
            WriteFailedError: If writing fails.
        """
        destination = self.paths.resolve(destination=destination_path).destination

        if self.filesystem.exists(destination):
            raise AlreadyExistsError(
                f"File ({os.fspath(destination)}) already exists", destination
            )

        self._write(destination, content, f"Could not write to file ({os.fspath(destination)})")
        logger.debug("Created file %s", destination)
        return self

    def read_file(self, source_path: PathLike | None = None) -> str:
        """Read the full content of a file.

        Args:
            source_path: Override for the configured source path.

        Returns:
            The file content.

        Raises:
            NotFoundError: If the source does not exist or cannot be read.
        """
        source = self.paths.resolve(source=source_path).source

        if not self.filesystem.exists(source):
            raise NotFoundError(
                source, message=f"File ({os.fspath(source)}) does not exist"
            )

        return self._read(source, f"Unable to read file ({os.fspath(source)})")

    def update_file(self, content: str, destination_path: PathLike | None = None) -> FileOperations:
        """Overwrite the content of an existing file.

        Args:
            content: The new full file body.
            destination_path: Override for the configured destination path.

        Returns:
            This instance for method chaining.

        Raises:
            NotFoundError: If the destination does not exist.
            WriteFailedError: If writing fails.
        """
        destination = self.paths.resolve(destination=destination_path).destination

        if not self.filesystem.exists(destination):
            raise NotFoundError(
                destination, message=f"File ({os.fspath(destination)}) does not exist"
            )

        self._write(destination, content, f"Could not update file ({os.fspath(destination)})")
        logger.debug("Updated file %s", destination)
        return self

    def delete_file(self, destination_path: PathLike | None = None) -> FileOperations:
        """Delete a file.

        Args:
            destination_path: Override for the configured destination path.

        Returns:
            This instance for method chaining.

        Raises:
            NotFoundError: If the destination does not exist.
            DeleteFailedError: If removal fails.
        """
        destination = self.paths.resolve(destination=destination_path).destination

        if not self.filesystem.exists(destination):
            raise NotFoundError(
                destination, message=f"File ({os.fspath(destination)}) does not exist"
            )

        try:
            self.filesystem.unlink(destination)
        except OSError as e:
            raise DeleteFailedError(
                f"Could not delete file ({os.fspath(destination)})", destination
            ) from e
        logger.debug("Deleted file %s", destination)
        return self

    def copy_file(
        self,
        source_path: PathLike | None = None,
        destination_path: PathLike | None = None,
    ) -> FileOperations:
        """Copy a file, overwriting any existing destination.

        Args:
            source_path: Override for the configured source path.
            destination_path: Override for the configured destination path.

        Returns:
            This instance for method chaining.

        Raises:
            NotFoundError: If the source does not exist.
            CopyFailedError: If copying fails.
        """
        paths = self.paths.resolve(source_path, destination_path)

        if not self.filesystem.exists(paths.source):
            raise NotFoundError(
                paths.source, message=f"Source file ({os.fspath(paths.source)}) does not exist"
            )

        try:
            self.filesystem.copy_file(paths.source, paths.destination)
        except OSError as e:
            raise CopyFailedError(
                f"Failed to copy file from ({os.fspath(paths.source)}) "
                f"to ({os.fspath(paths.destination)})",
                paths.destination,
            ) from e
        logger.debug("Copied %s to %s", paths.source, paths.destination)
        return self

    def replace_content(
        self,
        replacements: Mapping[str, str],
        placeholder_format: str = DEFAULT_PLACEHOLDER_FORMAT,
        source_path: PathLike | None = None,
        destination_path: PathLike | None = None,
    ) -> FileOperations:
        """Replace placeholders in a source file and write the result.

        Each key of ``replacements`` is substituted into ``placeholder_format``
        to build a literal token, and every occurrence of that token is
        replaced with the value, in the mapping's iteration order.

        Args:
            replacements: Mapping of placeholder key to replacement value.
            placeholder_format: Format with exactly one substitution slot.
            source_path: Override for the configured source path.
            destination_path: Override for the configured destination path.

        Returns:
            This instance for method chaining.

        Raises:
            InvalidPlaceholderFormatError: If the format is unusable.
            NotFoundError: If the source cannot be read.
            WriteFailedError: If writing the destination fails.
        """
        validate_format(placeholder_format)
        paths = self.paths.resolve(source_path, destination_path)

        content = self._read(
            paths.source, f"Unable to read source file: {os.fspath(paths.source)}"
        )
        content = replace_placeholders(content, replacements, placeholder_format)

        self._write(
            paths.destination,
            content,
            f"Unable to write to destination file: {os.fspath(paths.destination)}",
        )
        logger.debug(
            "Rendered %s to %s with %d replacements",
            paths.source,
            paths.destination,
            len(replacements),
        )
        return self

    def _read(self, source: PathLike, message: str) -> str:
        try:
            return self.filesystem.read_text(source, encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise NotFoundError(source, message=message) from e

    def _write(self, destination: PathLike, content: str, message: str) -> None:
        try:
            self.filesystem.write_text(destination, content, encoding=self.config.encoding)
        except (OSError, UnicodeEncodeError) as e:
            raise WriteFailedError(message, destination) from e
