"""CSV dump of every indexed substring."""

import csv
from pathlib import Path
from typing import Mapping, TextIO

from loguru import logger

from gridgrep.utils import write_file_safely


def write_entries_csv(entries: Mapping[str, int], filepath: str | Path) -> None:
    """Write ranked (substring, count) entries as CSV, preserving their order.

    Args:
        entries: Ranked mapping, as returned by ``SubstringIndex.all_entries``
        filepath: Destination CSV file
    """

    def write_rows(f: TextIO) -> None:
        writer = csv.writer(f)
        writer.writerow(["substring", "count"])
        for substring, count in entries.items():
            writer.writerow([substring, count])

    write_file_safely(filepath, write_rows, "writing substring dump")
    logger.info(f"  Wrote {len(entries):,} entries to {filepath}")
