"""Core domain logic for GridGrep."""

from .config import Config, load_config
from .errors import GridError, InvalidGridError, OversizeGridError
from .index import SubstringIndex, iter_lines, iter_substrings
from .ranking import rank_entries, ranking_key
from .types import Grid, IndexStats, RankedEntry

__all__ = [
    "Config",
    "Grid",
    "GridError",
    "IndexStats",
    "InvalidGridError",
    "OversizeGridError",
    "RankedEntry",
    "SubstringIndex",
    "iter_lines",
    "iter_substrings",
    "load_config",
    "rank_entries",
    "ranking_key",
]
