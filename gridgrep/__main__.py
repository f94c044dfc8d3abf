"""Main entry point for the gridgrep package."""

import sys

from loguru import logger

from gridgrep.cli import create_parser
from gridgrep.core import Config, GridError, SubstringIndex, load_config
from gridgrep.data import load_grid_file, load_word_file, read_grid_rows, read_word_line
from gridgrep.reports import format_time, write_entries_csv
from gridgrep.utils import Constants, setup_logger


def _collect_grid(config: Config, interactive: bool) -> list[str]:
    """Load grid rows from the configured file, or from stdin."""
    if config.grid:
        return load_grid_file(config.grid)

    if interactive:
        print(f"Enter the matrix row by row (type '{config.end_marker}' to finish):")

    def on_reject(row: str, expected: int) -> None:
        if interactive:
            print(f"Each row must have {expected} characters; please enter that row again.")

    return read_grid_rows(sys.stdin, config.end_marker, on_reject)


def _collect_words(config: Config, interactive: bool) -> list[str]:
    """Load query words from the configured file, or one line of stdin."""
    if config.words:
        return load_word_file(config.words)

    if interactive:
        print("Enter the words in the word stream separated by spaces:")
    return read_word_line(sys.stdin)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, args, parser)
    setup_logger(verbose=config.verbose, debug=config.debug)

    interactive = sys.stdin.isatty()
    if interactive:
        print("Welcome to the Word Search Console App!")

    rows = _collect_grid(config, interactive)
    words = _collect_words(config, interactive)

    try:
        index = SubstringIndex(rows)
    except GridError as e:
        logger.error(f"Error: {e}")
        return 1

    stats = index.stats
    logger.info(
        f"  Indexed {stats.rows}x{stats.columns} grid in {format_time(stats.elapsed_time)} "
        f"({stats.distinct_substrings:,} distinct substrings)"
    )

    result = index.find(words)
    logger.info(f"  {len(result)} of {len(set(words))} distinct words found")

    print()
    print(Constants.RESULTS_HEADER)
    for word in result:
        print(word)

    if config.dump:
        write_entries_csv(index.all_entries(), config.dump)

    return 0


if __name__ == "__main__":
    sys.exit(main())
