"""GridGrep - word frequency search over a character grid.

Index every horizontal and vertical substring of a grid and rank query words
by how often they occur.
"""

from gridgrep.core import (
    Config,
    GridError,
    IndexStats,
    InvalidGridError,
    OversizeGridError,
    SubstringIndex,
    load_config,
    rank_entries,
)
from gridgrep.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "GridError",
    "IndexStats",
    "InvalidGridError",
    "OversizeGridError",
    "SubstringIndex",
    "load_config",
    "rank_entries",
    "setup_logger",
]
