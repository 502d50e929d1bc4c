"""Timesheet renderer producing CSV lines."""

from rich.markup import escape

from cli.display.console import console, err_console
from dayplan.summary import TimesheetRow
from dayplan.utils import enquote


class TimesheetRenderer:
    """Render timesheet rows as <date>,<start>,<break>,<end> lines."""

    def __init__(
        self, separator: str = ",", quote: bool = False, date_format: str = "%Y-%m-%d"
    ):
        self.separator = separator
        self.quote = quote
        self.date_format = date_format

    def format_row(self, row: TimesheetRow) -> str:
        date_str = row.date.strftime(self.date_format) if row.date else ""
        fields = [date_str] + row.entry.to_fields()
        if self.quote:
            fields = [enquote(f) for f in fields]
        return self.separator.join(fields)

    def render_rows(self, rows: list[TimesheetRow]) -> None:
        for row in rows:
            console.print(
                self.format_row(row), markup=False, highlight=False, soft_wrap=True
            )

    def render_matches(self, names: list[str]) -> None:
        """List the known categories the filter selects."""
        err_console.print("[dim]Matching categories:[/dim]")
        for name in names:
            err_console.print(f"[dim]  '{escape(name)}'[/dim]", highlight=False)
