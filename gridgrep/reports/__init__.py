"""Report generation for GridGrep."""

from .dump import write_entries_csv
from .helpers import format_time

__all__ = [
    "format_time",
    "write_entries_csv",
]
