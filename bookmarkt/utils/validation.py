"""
Input validation utilities for bookmarkt.

This module provides validation functions for command-line arguments.
"""

import os
from pathlib import Path
from typing import Optional, Union

INPUT_EXTENSIONS = [".html", ".htm"]
CONFIG_EXTENSIONS = [".toml", ".json"]


class ValidationError(Exception):
    """Custom exception for validation errors."""

    pass


def validate_input_file(file_path: Union[str, Path, None]) -> Path:
    """
    Validate that the input file exists and is readable.

    Args:
        file_path: Path to the bookmark file

    Returns:
        Validated absolute Path

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if not file_path:
        raise ValidationError("Input file is required (use --input/-i)")

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    if path.suffix.lower() not in INPUT_EXTENSIONS:
        raise ValidationError(f"Input file must be HTML, got: {path.suffix}")

    return path.absolute()


def validate_output_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate the output file location, if one was given.

    Args:
        file_path: Path to the output file, or None for stdout

    Returns:
        Validated absolute Path, or None

    Raises:
        ValidationError: If the target directory is not writable
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if path.exists() and path.is_dir():
        raise ValidationError(f"Output path is a directory: {file_path}")

    parent = path.parent if str(path.parent) else Path(".")
    if parent.exists() and not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    return path.absolute()


def validate_config_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate configuration file if provided.

    Args:
        file_path: Path to the config file or None

    Returns:
        Validated Path object or None

    Raises:
        ValidationError: If file doesn't exist or isn't readable
    """
    if file_path is None:
        return None

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Configuration file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Configuration path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Configuration file is not readable: {file_path}")

    if path.suffix.lower() not in CONFIG_EXTENSIONS:
        raise ValidationError(
            f"Configuration file must be a .toml or .json file, got: {path.suffix}"
        )

    return path


def validate_indent(indent: Optional[int]) -> Optional[int]:
    """
    Validate the JSON indentation argument.

    Raises:
        ValidationError: If indent is outside 0-8
    """
    if indent is None:
        return None

    if indent < 0 or indent > 8:
        raise ValidationError(f"Indent must be between 0 and 8, got: {indent}")

    return indent
