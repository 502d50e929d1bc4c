"""Summary renderer for per-category time totals."""

from datetime import date

from rich.markup import escape
from rich.table import Table

from cli.display.console import console
from cli.display.formatters import format_minutes, format_share
from dayplan.summary import TimeSummary
from dayplan.utils import truncate_at

CATEGORY_COLUMN_WIDTH = 32


class SummaryRenderer:
    """Render time summaries across a date range."""

    def render_summary(
        self,
        summary: TimeSummary,
        from_date: date,
        til_date: date,
        human_readable: bool = False,
        category_filter: set[str] | None = None,
        verbose: bool = False,
    ) -> None:
        """Render the summary table.

        Args:
            summary: Totals to display.
            from_date: First summarized date.
            til_date: Last summarized date (inclusive).
            human_readable: Show hours and minutes instead of raw minutes.
            category_filter: Category names the summary was limited to.
            verbose: Also print range, filter and day count.
        """
        console.print()
        console.print("━" * 50)
        console.print(f"[bold]  Time summary: {from_date} to {til_date}[/bold]")
        console.print("━" * 50)

        if verbose:
            filter_label = ", ".join(sorted(category_filter)) if category_filter else "-"
            console.print(f"  Days read: {summary.day_count}")
            console.print(f"  Category filter: {filter_label}")

        if not summary.totals:
            console.print("\n  No events in range")
            console.print()
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("CATEGORY", style="cyan")
        table.add_column("PRIO", justify="right", style="dim")
        table.add_column("TIME", justify="right")
        table.add_column("SHARE", justify="right", style="dim")

        total = summary.total_minutes
        for category, minutes in summary.sorted_totals():
            table.add_row(
                escape(truncate_at(category.name, CATEGORY_COLUMN_WIDTH)),
                str(category.priority),
                format_minutes(minutes, human_readable),
                format_share(minutes, total),
            )

        console.print()
        console.print(table)
        console.print(f"\n  Total: {format_minutes(total, human_readable)}")
        console.print()

    def render_error(self, message: str) -> None:
        """Render an error message."""
        console.print(f"\n[red]Error: {escape(message)}[/red]", highlight=False)
