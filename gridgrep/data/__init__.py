"""Data loading for GridGrep."""

from gridgrep.data.loaders import (
    load_grid_file,
    load_word_file,
    parse_word_stream,
    read_grid_rows,
    read_word_line,
)

__all__ = [
    "load_grid_file",
    "load_word_file",
    "parse_word_stream",
    "read_grid_rows",
    "read_word_line",
]
