"""Shared data types for file operations."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Union

__all__ = ["PathLike", "PathPair"]

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class PathPair:
    """Source and destination paths used when an operation gets no override.

    Paths are stored verbatim: no normalization and no existence check.

    Attributes:
        source: Path read from by read, copy and replace operations.
        destination: Path written to by create, update and delete operations.
    """

    source: PathLike = ""
    destination: PathLike = ""

    def with_source(self, path: PathLike) -> PathPair:
        """Return a copy with a different source path."""
        return replace(self, source=path)

    def with_destination(self, path: PathLike) -> PathPair:
        """Return a copy with a different destination path."""
        return replace(self, destination=path)

    def resolve(
        self,
        source: PathLike | None = None,
        destination: PathLike | None = None,
    ) -> PathPair:
        """Apply per-call overrides.

        Args:
            source: Source override, or None to keep the configured one.
            destination: Destination override, or None to keep the configured one.

        Returns:
            PathPair with overrides applied.
        """
        return PathPair(
            source=self.source if source is None else source,
            destination=self.destination if destination is None else destination,
        )
