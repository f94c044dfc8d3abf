"""Command-line interface for the GridGrep project."""

import argparse

from gridgrep.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="gridgrep",
        description="Rank words by how often they occur horizontally and vertically in a grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Type the grid row by row (finish with END), then a line of words
  %(prog)s

  # Grid and words from files
  %(prog)s --grid puzzle.txt --words words.txt -v

  # Also write every substring and its count to CSV
  %(prog)s --grid puzzle.txt --words words.txt --dump counts.csv

  # Using JSON config
  %(prog)s --config config.json

The grid holds at most 64 rows of at most 64 characters, all rows the same
length. At most the top 10 matching words are printed, most frequent first,
ties in alphabetical order.

Example config.json:
{
  "grid": "puzzle.txt",
  "words": "words.txt",
  "dump": "counts.csv",
  "end_marker": "END",
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Inputs
    parser.add_argument(
        "-g", "--grid", type=str, help="Grid file, one row per line (default: read from stdin)"
    )
    parser.add_argument(
        "-w",
        "--words",
        type=str,
        help="File of whitespace-separated words (default: one line from stdin)",
    )
    parser.add_argument(
        "--end-marker",
        type=str,
        default=Constants.DEFAULT_END_MARKER,
        help="Line that ends interactive grid entry (case-insensitive)",
    )

    # Output
    parser.add_argument(
        "--dump", type=str, help="Write every substring with its count to this CSV file"
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
