"""Unit tests for grid and word loading behavior.

Each test has a single assertion and focuses on behavior.
"""

import io

import pytest

from gridgrep.data import (
    load_grid_file,
    load_word_file,
    parse_word_stream,
    read_grid_rows,
    read_word_line,
)


class TestReadGridRows:
    """Test interactive grid row collection."""

    def test_stops_at_end_marker(self) -> None:
        """Rows after the end marker are not read."""
        assert read_grid_rows(io.StringIO("abc\ndef\nEND\nghi\n")) == ["abc", "def"]

    def test_end_marker_is_case_insensitive(self) -> None:
        """Lower case end marker also terminates entry."""
        assert read_grid_rows(io.StringIO("abc\nend\n")) == ["abc"]

    def test_stops_at_end_of_input(self) -> None:
        """Running out of input ends entry."""
        assert read_grid_rows(io.StringIO("abc\ndef")) == ["abc", "def"]

    def test_ignores_blank_lines(self) -> None:
        """Blank lines are skipped."""
        assert read_grid_rows(io.StringIO("abc\n\ndef\nEND\n")) == ["abc", "def"]

    def test_strips_windows_line_endings(self) -> None:
        """Carriage returns are not part of a row."""
        assert read_grid_rows(io.StringIO("abc\r\ndef\r\nEND\r\n")) == ["abc", "def"]

    def test_drops_rows_of_wrong_length(self) -> None:
        """A row differing in length from the first is dropped."""
        assert read_grid_rows(io.StringIO("abc\nde\nfgh\nEND\n")) == ["abc", "fgh"]

    def test_reports_dropped_rows(self) -> None:
        """The reject callback receives the row and the expected length."""
        rejected = []
        read_grid_rows(
            io.StringIO("abc\nde\nEND\n"), on_reject=lambda r, n: rejected.append((r, n))
        )
        assert rejected == [("de", 3)]

    def test_custom_end_marker(self) -> None:
        """A custom marker ends entry and END becomes an ordinary row."""
        assert read_grid_rows(io.StringIO("END\nDONE\nabc\n"), end_marker="DONE") == ["END"]

    def test_marker_with_surrounding_spaces_is_a_row(self) -> None:
        """Only a line exactly matching the marker ends entry."""
        rows = read_grid_rows(io.StringIO("abcde\nEND  \nxyzwv\nEND\n"))
        assert rows == ["abcde", "END  ", "xyzwv"]

    def test_empty_input_returns_no_rows(self) -> None:
        """Immediate end marker gives an empty grid."""
        assert not read_grid_rows(io.StringIO("END\n"))


class TestLoadGridFile:
    """Test grid file loading."""

    def test_loads_one_row_per_line(self, tmp_path) -> None:
        """Each line of the file is a row."""
        grid_file = tmp_path / "grid.txt"
        grid_file.write_text("abcd\nefgh\n")
        assert load_grid_file(str(grid_file)) == ["abcd", "efgh"]

    def test_ignores_blank_lines(self, tmp_path) -> None:
        """Blank lines in the file are skipped."""
        grid_file = tmp_path / "grid.txt"
        grid_file.write_text("abcd\n\nefgh\n\n")
        assert load_grid_file(str(grid_file)) == ["abcd", "efgh"]

    def test_keeps_ragged_rows(self, tmp_path) -> None:
        """Row lengths are not checked while loading."""
        grid_file = tmp_path / "grid.txt"
        grid_file.write_text("abcd\nef\n")
        assert load_grid_file(str(grid_file)) == ["abcd", "ef"]

    def test_missing_file_raises(self, tmp_path) -> None:
        """A grid path that does not exist is an error."""
        with pytest.raises(FileNotFoundError):
            load_grid_file(str(tmp_path / "missing.txt"))


class TestWordLoading:
    """Test query word parsing and loading."""

    def test_splits_on_any_whitespace(self) -> None:
        """Spaces, tabs and newlines all separate words."""
        assert parse_word_stream("  chill \twind\nfrost ") == ["chill", "wind", "frost"]

    def test_none_text_gives_no_words(self) -> None:
        """Missing text yields an empty word list."""
        assert not parse_word_stream(None)

    def test_keeps_duplicates(self) -> None:
        """Parsing does not deduplicate."""
        assert parse_word_stream("a a") == ["a", "a"]

    def test_reads_single_line(self) -> None:
        """Only the first line of the stream is read."""
        assert read_word_line(io.StringIO("chill wind\nfrost\n")) == ["chill", "wind"]

    def test_read_line_at_end_of_input(self) -> None:
        """End of input yields no words."""
        assert not read_word_line(io.StringIO(""))

    def test_loads_words_across_lines(self, tmp_path) -> None:
        """Every word in a word file is loaded."""
        word_file = tmp_path / "words.txt"
        word_file.write_text("chill wind\ncold frost\n")
        assert load_word_file(str(word_file)) == ["chill", "wind", "cold", "frost"]
