"""Grid and word list loading."""

from typing import Callable, TextIO

from loguru import logger

from gridgrep.utils import Constants, read_text_file


def _strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


def read_grid_rows(
    stream: TextIO,
    end_marker: str = Constants.DEFAULT_END_MARKER,
    on_reject: Callable[[str, int], None] | None = None,
) -> list[str]:
    """Collect grid rows typed one per line.

    Reading stops at a line exactly equal to the end marker, ignoring case, or at
    end of input. Blank lines are ignored. A row whose length differs from the
    first accepted row is dropped so the user can type it again.

    Args:
        stream: Text stream to read rows from
        end_marker: Line that terminates entry
        on_reject: Called with (row, expected_length) for each dropped row

    Returns:
        Accepted rows, in the order typed
    """
    rows: list[str] = []
    marker = end_marker.casefold()

    for raw_line in stream:
        line = _strip_line_ending(raw_line)
        if line.casefold() == marker:
            break
        if not line:
            continue

        if rows and len(line) != len(rows[0]):
            expected = len(rows[0])
            logger.warning(
                f"⚠️  Row '{line}' has {len(line)} characters, expected {expected}; row ignored"
            )
            if on_reject is not None:
                on_reject(line, expected)
            continue

        rows.append(line)

    logger.info(f"  Read {len(rows)} grid rows")
    return rows


def load_grid_file(filepath: str) -> list[str]:
    """Load grid rows from a file, one row per line.

    Rows are not checked for equal length here; building the index does that.
    """
    content = read_text_file(filepath, "grid file")
    rows = [line for line in content.splitlines() if line]
    logger.info(f"  Loaded {len(rows)} grid rows from {filepath}")
    return rows


def parse_word_stream(text: str | None) -> list[str]:
    """Split text into words on any whitespace, dropping empty entries."""
    if not text:
        return []
    return text.split()


def read_word_line(stream: TextIO) -> list[str]:
    """Read one line of whitespace-separated words (empty at end of input)."""
    return parse_word_stream(stream.readline())


def load_word_file(filepath: str) -> list[str]:
    """Load every whitespace-separated word in a file."""
    words = parse_word_stream(read_text_file(filepath, "word file"))
    logger.info(f"  Loaded {len(words)} words from {filepath}")
    return words
