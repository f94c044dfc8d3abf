"""Utility functions for GridGrep."""

from gridgrep.utils.constants import Constants
from gridgrep.utils.helpers import expand_file_path, read_text_file, write_file_safely
from gridgrep.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "read_text_file",
    "setup_logger",
    "write_file_safely",
]
