"""Shared constants for GridGrep."""


class Constants:
    """Hard limits and defaults used across the package."""

    # Grid capacity, in both directions
    MAX_GRID_DIMENSION = 64

    # Maximum number of words returned by a query
    MAX_RESULTS = 10

    # Line that terminates interactive grid entry (case-insensitive)
    DEFAULT_END_MARKER = "END"

    RESULTS_HEADER = "Top 10 Words Found:"
