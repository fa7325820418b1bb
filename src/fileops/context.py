"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands can
be exercised with test doubles instead of the real filesystem.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from fileops.config import FileOperationsConfig
from fileops.operations import FileOperations
from fileops.protocols import FileSystem

# Environment variable naming a YAML config file
CONFIG_ENV_VAR = "FILEOPS_CONFIG"


@dataclass
class AppContext:
    """Container for the services used by CLI commands.

    The filesystem is typed with the FileSystem protocol so any structurally
    compatible object can be injected.
    """

    filesystem: FileSystem
    config: FileOperationsConfig
    operations: FileOperations


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_path: YAML config file. Falls back to $FILEOPS_CONFIG, then
            to built-in defaults.

    Returns:
        Configured AppContext.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the config file is invalid.
    """
    from fileops.filesystem import RealFileSystem

    if config_path is None and os.environ.get(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])

    config = (
        FileOperationsConfig.from_file(config_path)
        if config_path
        else FileOperationsConfig()
    )
    filesystem = RealFileSystem()
    operations = FileOperations(filesystem=filesystem, config=config)

    return AppContext(filesystem=filesystem, config=config, operations=operations)
