"""Exceptions raised while building a substring index."""


class GridError(ValueError):
    """Base class for grids the index refuses to build from."""


class InvalidGridError(GridError):
    """Grid is missing, has no rows, or is not rectangular."""


class OversizeGridError(GridError):
    """Grid exceeds the fixed row or column capacity."""

    def __init__(self, rows: int, columns: int, limit: int):
        self.rows = rows
        self.columns = columns
        self.limit = limit
        super().__init__(
            f"Matrix size cannot exceed {limit}x{limit} (got {rows} rows x {columns} columns)."
        )
