"""Tests for filesystem primitives."""

from __future__ import annotations

from pathlib import Path

import pytest

from fileops.filesystem import RealFileSystem
from fileops.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test RealFileSystem structurally satisfies FileSystem."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_read_text(self, tmp_path: Path) -> None:
        """Test reading text content from a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "test.txt"
        test_file.write_text("Hello, World!")

        content = fs.read_text(test_file)

        assert content == "Hello, World!"

    def test_read_text_keeps_line_endings(self, tmp_path: Path) -> None:
        """Test CRLF line endings are not translated on read."""
        fs = RealFileSystem()
        test_file = tmp_path / "crlf.txt"
        test_file.write_bytes(b"one\r\ntwo\r\n")

        assert fs.read_text(test_file) == "one\r\ntwo\r\n"

    def test_read_text_not_found(self, tmp_path: Path) -> None:
        """Test reading a non-existent file raises FileNotFoundError."""
        fs = RealFileSystem()
        test_file = tmp_path / "missing.txt"

        with pytest.raises(FileNotFoundError):
            fs.read_text(test_file)

    def test_write_text(self, tmp_path: Path) -> None:
        """Test writing text content to a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "output.txt"

        fs.write_text(test_file, "Test content")

        assert test_file.read_text() == "Test content"

    def test_write_text_keeps_line_endings(self, tmp_path: Path) -> None:
        """Test newlines are written untranslated."""
        fs = RealFileSystem()
        test_file = tmp_path / "lf.txt"

        fs.write_text(test_file, "a\nb\r\n")

        assert test_file.read_bytes() == b"a\nb\r\n"

    def test_exists_true(self, tmp_path: Path) -> None:
        """Test exists returns True for existing path."""
        fs = RealFileSystem()
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert fs.exists(test_file) is True

    def test_exists_false(self, tmp_path: Path) -> None:
        """Test exists returns False for non-existent path."""
        fs = RealFileSystem()

        assert fs.exists(tmp_path / "missing.txt") is False

    def test_exists_false_for_empty_path(self) -> None:
        """Test an empty path never exists."""
        assert RealFileSystem().exists("") is False

    def test_is_dir_true(self, tmp_path: Path) -> None:
        """Test is_dir returns True for directory."""
        fs = RealFileSystem()
        test_dir = tmp_path / "subdir"
        test_dir.mkdir()

        assert fs.is_dir(test_dir) is True

    def test_is_dir_false_for_file(self, tmp_path: Path) -> None:
        """Test is_dir returns False for file."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.is_dir(test_file) is False

    def test_is_dir_false_for_missing(self, tmp_path: Path) -> None:
        """Test is_dir returns False for non-existent path."""
        assert RealFileSystem().is_dir(tmp_path / "missing") is False

    def test_is_symlink(self, tmp_path: Path) -> None:
        """Test is_symlink distinguishes links from their targets."""
        fs = RealFileSystem()
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target, target_is_directory=True)

        assert fs.is_symlink(link) is True
        assert fs.is_symlink(target) is False

    def test_mkdir_simple(self, tmp_path: Path) -> None:
        """Test creating a simple directory."""
        fs = RealFileSystem()
        new_dir = tmp_path / "newdir"

        fs.mkdir(new_dir)

        assert new_dir.is_dir()

    def test_mkdir_parents(self, tmp_path: Path) -> None:
        """Test creating nested directories with parents=True."""
        fs = RealFileSystem()
        nested_dir = tmp_path / "a" / "b" / "c"

        fs.mkdir(nested_dir, parents=True)

        assert nested_dir.is_dir()

    def test_mkdir_mode(self, tmp_path: Path) -> None:
        """Test mkdir applies the requested mode."""
        fs = RealFileSystem()
        new_dir = tmp_path / "private"

        fs.mkdir(new_dir, mode=0o700)

        assert new_dir.stat().st_mode & 0o077 == 0

    def test_mkdir_raises_without_exist_ok(self, tmp_path: Path) -> None:
        """Test mkdir raises FileExistsError without exist_ok."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        with pytest.raises(FileExistsError):
            fs.mkdir(existing_dir, exist_ok=False)

    def test_iterdir(self, tmp_path: Path) -> None:
        """Test iterdir lists entries without pseudo-entries."""
        fs = RealFileSystem()
        (tmp_path / "b.txt").touch()
        (tmp_path / "a").mkdir()

        entries = fs.iterdir(tmp_path)

        assert entries == [tmp_path / "a", tmp_path / "b.txt"]

    def test_unlink(self, tmp_path: Path) -> None:
        """Test removing a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "to_delete.txt"
        test_file.touch()

        fs.unlink(test_file)

        assert not test_file.exists()

    def test_unlink_missing_raises(self, tmp_path: Path) -> None:
        """Test unlinking non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            RealFileSystem().unlink(tmp_path / "missing.txt")

    def test_rmdir(self, tmp_path: Path) -> None:
        """Test removing an empty directory."""
        fs = RealFileSystem()
        empty = tmp_path / "empty"
        empty.mkdir()

        fs.rmdir(empty)

        assert not empty.exists()

    def test_rmdir_not_empty_raises(self, tmp_path: Path) -> None:
        """Test removing a non-empty directory raises OSError."""
        full = tmp_path / "full"
        full.mkdir()
        (full / "file.txt").touch()

        with pytest.raises(OSError):
            RealFileSystem().rmdir(full)

    def test_copy_file_overwrites(self, tmp_path: Path) -> None:
        """Test copy_file replaces an existing destination byte for byte."""
        fs = RealFileSystem()
        src = tmp_path / "src.bin"
        src.write_bytes(b"\x00\x01binary\xff")
        dst = tmp_path / "dst.bin"
        dst.write_bytes(b"old content that is longer")

        fs.copy_file(src, dst)

        assert dst.read_bytes() == b"\x00\x01binary\xff"
