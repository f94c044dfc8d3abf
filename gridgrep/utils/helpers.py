"""Shared utility functions for GridGrep."""

import os
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | Path | None) -> str | None:
    """Return filepath with a leading ~ resolved, or None when no path was given."""
    if filepath is None or str(filepath) == "":
        return None
    return str(Path(filepath).expanduser())


def read_text_file(file_path: str | Path, description: str = "file") -> str:
    """Read a UTF-8 text file with consistent error handling.

    Args:
        file_path: Path to the file to read
        description: What the file holds, for error messages

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If reading is denied
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    file_str = expand_file_path(str(file_path)) or str(file_path)
    try:
        with open(file_str, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.error(f"✗ {description.capitalize()} not found: {file_str}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading {description}: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {description} {file_str}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Write to a file with consistent error handling.

    Args:
        file_path: Path to the file to write
        content_writer: Callable that takes a file handle and writes content
        operation_name: Description of the operation for error messages

    Raises:
        PermissionError: If file writing is denied
        OSError: If file writing fails for OS-related reasons
    """
    file_str = expand_file_path(str(file_path)) or str(file_path)
    try:
        parent_dir = os.path.dirname(file_str) or "."
        os.makedirs(parent_dir, exist_ok=True)

        with open(file_str, "w", encoding="utf-8", newline="") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ Permission denied {operation_name}: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error {operation_name} {file_str}: {e}")
        raise
