"""Configuration for file operations."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fileops.errors import InvalidPlaceholderFormatError
from fileops.template import DEFAULT_PLACEHOLDER_FORMAT, validate_format

# Read/write/execute for everyone, before umask
DEFAULT_DIRECTORY_MODE = 0o777


class FileOperationsConfig(BaseModel):
    """Settings shared by every FileOperations call.

    Attributes:
        directory_mode: Permission bits for created directories.
        encoding: Text encoding for reads and writes.
        placeholder_format: Default placeholder format for the CLI.
        create_parents: Create missing intermediate directories instead of
            requiring the immediate parent to exist.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    directory_mode: int = Field(default=DEFAULT_DIRECTORY_MODE, alias="directoryMode")
    encoding: str = "utf-8"
    placeholder_format: str = Field(
        default=DEFAULT_PLACEHOLDER_FORMAT, alias="placeholderFormat"
    )
    create_parents: bool = Field(default=True, alias="createParents")

    @field_validator("directory_mode")
    @classmethod
    def _check_mode(cls, value: int) -> int:
        if not 0 <= value <= 0o7777:
            raise ValueError(f"directory_mode out of range: {oct(value)}")
        return value

    @field_validator("placeholder_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        try:
            return validate_format(value)
        except InvalidPlaceholderFormatError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def from_file(cls, path: Path) -> FileOperationsConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML file.

        Returns:
            Parsed FileOperationsConfig.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If YAML is invalid or doesn't describe a valid config.
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
