"""Display module for rendering day planner output.

- SummaryRenderer: per-category time totals
- TimesheetRenderer: CSV timesheet lines
- console: Shared Rich console instance
"""

from cli.display.console import console
from cli.display.formatters import format_minutes, format_share
from cli.display.summary_renderer import SummaryRenderer
from cli.display.timesheet_renderer import TimesheetRenderer

__all__ = [
    "console",
    "SummaryRenderer",
    "TimesheetRenderer",
    "format_minutes",
    "format_share",
]
