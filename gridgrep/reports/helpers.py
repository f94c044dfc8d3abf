"""Helper functions for report generation."""


def format_time(seconds: float) -> str:
    """Format an index build duration, in milliseconds below one second."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"
