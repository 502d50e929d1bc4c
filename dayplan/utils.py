"""Utility functions for the day planner."""


def duration_to_string(minutes: int) -> str:
    """Format a duration in minutes as hours and minutes, e.g. "1h 5min"."""
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours}h {mins}min"


def truncate_at(s: str, length: int) -> str:
    """Truncate a string to length characters, ending in "..." if cut."""
    if len(s) <= length:
        return s
    return s[: max(length - 3, 0)] + "..."


def enquote(s: str) -> str:
    """Wrap a CSV field in double quotes, doubling embedded quotes."""
    return '"' + s.replace('"', '""') + '"'
