"""Pure formatting functions for display output."""

from dayplan.utils import duration_to_string


def format_minutes(minutes: int, human_readable: bool = False) -> str:
    """Format a duration as "95 min", or "1h 35min" when human_readable."""
    if human_readable:
        return duration_to_string(minutes)
    return f"{minutes} min"


def format_share(part: int, total: int) -> str:
    """Percentage of part in total, e.g. "42.0%"."""
    pct = (part / total) * 100 if total else 0
    return f"{pct:.1f}%"
