"""Type definitions for GridGrep."""

from typing import Sequence

from pydantic import BaseModel, Field

# A grid row is either a string or any sequence of single characters
GridRow = str | Sequence[str]
Grid = Sequence[GridRow]

# Ranked (substring, count) pair
RankedEntry = tuple[str, int]


class IndexStats(BaseModel):
    """Summary of a built substring index."""

    rows: int = Field(ge=0)
    columns: int = Field(ge=0)
    lines_scanned: int = Field(0, ge=0)
    distinct_substrings: int = Field(0, ge=0)
    total_occurrences: int = Field(0, ge=0)
    elapsed_time: float = Field(0.0, ge=0)

    model_config = {"frozen": True}
