"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fileops.config import FileOperationsConfig
from fileops.context import AppContext
from fileops.filesystem import RealFileSystem
from fileops.operations import FileOperations


@pytest.fixture
def ops() -> FileOperations:
    """FileOperations backed by the real filesystem."""
    return FileOperations()


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create a directory tree with nested subdirectories and files."""
    root = tmp_path / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "top.txt").write_text("top")
    (root / "sub" / "middle.txt").write_text("middle")
    (root / "sub" / "deeper" / "bottom.txt").write_text("bottom")
    return root


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """Template file with default-format placeholders."""
    path = tmp_path / "template.txt"
    path.write_text("Hello {{ name }}!\nWelcome to {{ place }}, {{ name }}.\n")
    return path


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_symlink.return_value = False
    fs.read_text.return_value = ""
    fs.iterdir.return_value = []
    return fs


@pytest.fixture
def mock_ops(mock_filesystem: MagicMock) -> FileOperations:
    """FileOperations backed by the mock filesystem."""
    return FileOperations(filesystem=mock_filesystem)


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def app_context() -> AppContext:
    """AppContext wired to the real filesystem with default settings."""
    filesystem = RealFileSystem()
    config = FileOperationsConfig()
    return AppContext(
        filesystem=filesystem,
        config=config,
        operations=FileOperations(filesystem=filesystem, config=config),
    )


@pytest.fixture
def mock_app_context() -> MagicMock:
    """Create a complete mock AppContext for CLI testing."""
    ctx = MagicMock(spec=AppContext)
    ctx.filesystem = MagicMock()
    ctx.config = FileOperationsConfig()
    ctx.operations = MagicMock()
    return ctx
