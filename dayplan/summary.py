"""Summary helpers over one or more days."""

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable

from dayplan.exceptions import DayplanError
from dayplan.models.category import Category
from dayplan.models.day import Day
from dayplan.models.timesheet import TimesheetEntry

logger = logging.getLogger(__name__)


@dataclass
class TimeSummary:
    """Per-category minutes across a number of days."""

    totals: dict[Category, int] = field(default_factory=dict)
    day_count: int = 0

    @property
    def total_minutes(self) -> int:
        return sum(self.totals.values())

    def sorted_totals(self) -> list[tuple[Category, int]]:
        """Totals, largest first, ties by name."""
        return sorted(self.totals.items(), key=lambda item: (-item[1], item[0].name))


@dataclass
class TimesheetRow:
    """A timesheet entry for a date."""

    date: date | None
    entry: TimesheetEntry


def summarize_days(
    days: Iterable[Day], category_filter: set[str] | None = None
) -> TimeSummary:
    """Sum non-overlapping time per category over all days.

    Args:
        days: Days to summarize.
        category_filter: If given, only categories with these names are kept.

    Returns:
        TimeSummary with per-category totals.
    """
    summary = TimeSummary()
    for day in days:
        summary.day_count += 1
        for category, minutes in day.sum_up_by_category().items():
            if category_filter and category.name not in category_filter:
                continue
            summary.totals[category] = summary.totals.get(category, 0) + minutes

    logger.debug(
        f"Summarized {summary.day_count} days into {len(summary.totals)} categories"
    )
    return summary


def build_category_matcher(
    include: str | None = None, exclude: str | None = None
) -> Callable[[str], bool]:
    """Build a category-name matcher from include/exclude regexes.

    Empty patterns are ignored. A name matches if it matches the include
    pattern (when given) and does not match the exclude pattern (when given).
    """
    try:
        include_re = re.compile(include) if include else None
        exclude_re = re.compile(exclude) if exclude else None
    except re.error as e:
        raise DayplanError(f"Invalid category filter regex: {e}") from e

    def matcher(name: str) -> bool:
        if include_re is not None and not include_re.search(name):
            return False
        if exclude_re is not None and exclude_re.search(name):
            return False
        return True

    return matcher


def build_timesheet(
    days: Iterable[Day],
    matcher: Callable[[str], bool],
    include_empty: bool = False,
) -> list[TimesheetRow]:
    """One timesheet row per day, skipping empty days unless requested."""
    rows = []
    for day in days:
        entry = day.get_timesheet_entry(matcher)
        if entry.is_empty() and not include_empty:
            continue
        rows.append(TimesheetRow(date=day.date, entry=entry))
    return rows
