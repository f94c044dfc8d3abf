"""Frequency ranking shared by queries and full dumps."""

from typing import Iterable, Mapping

from gridgrep.core.types import RankedEntry


def ranking_key(entry: RankedEntry) -> tuple[int, str]:
    """Sort key ordering by count descending, then word by code point."""
    word, count = entry
    return -count, word


def rank_entries(
    counts: Mapping[str, int] | Iterable[RankedEntry], limit: int | None = None
) -> list[RankedEntry]:
    """Rank (word, count) pairs by frequency.

    Args:
        counts: Mapping of word to count, or an iterable of (word, count) pairs
        limit: Keep only the first ``limit`` entries (None keeps all)

    Returns:
        List of (word, count) tuples, highest count first, ties alphabetical
    """
    pairs = counts.items() if isinstance(counts, Mapping) else counts
    ranked = sorted(pairs, key=ranking_key)
    if limit is not None:
        return ranked[: max(limit, 0)]
    return ranked
