"""Unit tests for frequency ranking.

Each test has exactly one assertion.
"""

from gridgrep.core import rank_entries, ranking_key


class TestRankingKey:
    """Test the sort key used for ranking."""

    def test_higher_count_sorts_first(self) -> None:
        """A larger count produces a smaller key."""
        assert ranking_key(("zebra", 5)) < ranking_key(("apple", 1))

    def test_equal_counts_sort_alphabetically(self) -> None:
        """Equal counts fall back to the word."""
        assert ranking_key(("apple", 2)) < ranking_key(("banana", 2))


class TestRankEntries:
    """Test ranking of word counts."""

    def test_ranks_mapping_by_count_then_word(self) -> None:
        """Mapping entries are ordered by count descending, then word."""
        assert rank_entries({"b": 1, "a": 1, "c": 3}) == [("c", 3), ("a", 1), ("b", 1)]

    def test_accepts_iterable_of_pairs(self) -> None:
        """Pairs are ranked like mapping items."""
        assert rank_entries([("x", 1), ("y", 2)]) == [("y", 2), ("x", 1)]

    def test_limit_truncates(self) -> None:
        """Only the first ``limit`` entries are kept."""
        assert rank_entries({"a": 3, "b": 2, "c": 1}, limit=2) == [("a", 3), ("b", 2)]

    def test_zero_limit_returns_nothing(self) -> None:
        """A zero limit keeps no entries."""
        assert not rank_entries({"a": 1}, limit=0)

    def test_none_limit_keeps_everything(self) -> None:
        """Without a limit every entry is returned."""
        assert len(rank_entries({str(i): i for i in range(50)})) == 50

    def test_compares_by_code_point(self) -> None:
        """Upper case letters sort before lower case on ties."""
        assert rank_entries({"a": 1, "B": 1})[0] == ("B", 1)

    def test_empty_input(self) -> None:
        """Nothing to rank gives an empty list."""
        assert not rank_entries({})
