"""Substring frequency index over a 2-D character grid.

Every row (read left to right) and every column (read top to bottom) is a
line. Each contiguous run of characters in a line is one occurrence of that
substring, and the index keeps the total number of occurrences across all
lines. The table is built once and never changes afterwards.
"""

from collections import Counter
import time
from types import MappingProxyType
from typing import Iterable, Iterator

from loguru import logger

from gridgrep.core.errors import InvalidGridError, OversizeGridError
from gridgrep.core.ranking import rank_entries
from gridgrep.core.types import Grid, IndexStats
from gridgrep.utils.constants import Constants


def _join_row(row, row_number: int) -> str:
    """Return a row as a string; non-string rows must hold single characters."""
    if isinstance(row, str):
        return row
    try:
        cells = list(row)
    except TypeError as e:
        raise InvalidGridError(f"Row {row_number} is not a sequence of characters: {e}") from e
    for cell in cells:
        if not isinstance(cell, str) or len(cell) != 1:
            raise InvalidGridError(
                f"Row {row_number} holds {cell!r}; every cell must be a single character."
            )
    return "".join(cells)


def _normalize_rows(grid: Grid | None) -> list[str]:
    """Validate the grid shape and return its rows as strings.

    Raises:
        InvalidGridError: If the grid is None, empty, or not rectangular
        OversizeGridError: If rows or columns exceed the capacity
    """
    if grid is None:
        raise InvalidGridError("Matrix cannot be null or empty.")

    try:
        numbered_rows = list(enumerate(grid, start=1))
    except TypeError as e:
        raise InvalidGridError(f"Matrix must be a sequence of rows: {e}") from e
    rows = [_join_row(row, row_number) for row_number, row in numbered_rows]

    if not rows:
        raise InvalidGridError("Matrix cannot be null or empty.")

    limit = Constants.MAX_GRID_DIMENSION
    row_count = len(rows)
    column_count = len(rows[0])
    if row_count > limit or column_count > limit:
        raise OversizeGridError(row_count, column_count, limit)

    for row_number, row in enumerate(rows, start=1):
        if len(row) != column_count:
            raise InvalidGridError(
                f"Row {row_number} has {len(row)} characters, expected {column_count}."
            )

    return rows


def iter_lines(rows: list[str]) -> Iterator[str]:
    """Yield every horizontal row, then every vertical column, of a rectangular grid."""
    yield from rows
    for column in zip(*rows):
        yield "".join(column)


def iter_substrings(line: str) -> Iterator[str]:
    """Yield every contiguous substring of a line, one per (start, length) pair."""
    size = len(line)
    for start in range(size):
        for end in range(start + 1, size + 1):
            yield line[start:end]


class SubstringIndex:
    """Immutable frequency table of all horizontal and vertical substrings.

    Example:
        >>> index = SubstringIndex(["chill", "cloud", "windy", "sharp", "frost"])
        >>> index.find(["chill", "wind", "cold", "frost"])
        ['chill', 'frost', 'wind']
    """

    def __init__(self, grid: Grid | None):
        """Build the index.

        Args:
            grid: Ordered rows of equal length, at most 64x64

        Raises:
            InvalidGridError: If the grid is None, empty, or not rectangular
            OversizeGridError: If the grid exceeds 64 rows or 64 columns
        """
        start_time = time.perf_counter()
        rows = _normalize_rows(grid)

        counts: Counter[str] = Counter()
        lines_scanned = 0
        for line in iter_lines(rows):
            counts.update(iter_substrings(line))
            lines_scanned += 1

        self._counts = MappingProxyType(dict(counts))
        self._stats = IndexStats(
            rows=len(rows),
            columns=len(rows[0]),
            lines_scanned=lines_scanned,
            distinct_substrings=len(counts),
            total_occurrences=sum(counts.values()),
            elapsed_time=time.perf_counter() - start_time,
        )

        logger.debug(
            f"Indexed {self._stats.rows}x{self._stats.columns} grid: "
            f"{self._stats.distinct_substrings:,} distinct substrings, "
            f"{self._stats.total_occurrences:,} occurrences"
        )

    @property
    def stats(self) -> IndexStats:
        """Construction summary."""
        return self._stats

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def count(self, word: str) -> int:
        """Return how many times word occurs in the grid (0 if it never does)."""
        return self._counts.get(word, 0)

    def find(self, words: Iterable[str] | None) -> list[str]:
        """Rank the query words that occur in the grid.

        Each distinct word is considered once, however often it repeats in
        the query. Words that never occur are dropped.

        Args:
            words: Candidate words (may be empty or contain duplicates)

        Returns:
            Up to 10 words, highest grid count first, ties in alphabetical order
        """
        if words is None:
            return []

        matches = {word: self._counts[word] for word in set(words) if word in self._counts}
        ranked = rank_entries(matches, limit=Constants.MAX_RESULTS)
        return [word for word, _ in ranked]

    def all_entries(self) -> dict[str, int]:
        """Return every substring with its count, in ranked order."""
        return dict(rank_entries(self._counts))
