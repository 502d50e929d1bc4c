"""Add an event to a day."""

import logging
from datetime import date, datetime

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.display.summary_renderer import SummaryRenderer
from dayplan.exceptions import DayplanError
from dayplan.models.event import Event
from dayplan.models.timestamp import Timestamp

logger = logging.getLogger(__name__)


def add_command(
    name: Annotated[str, typer.Argument(help="Event name")],
    end: Annotated[str, typer.Option("--end", "-e", help="End time (HH:MM)")],
    start: Annotated[
        str | None,
        typer.Option(
            "--start", "-s", help="Start time (HH:MM, default: now on the snap grid)"
        ),
    ] = None,
    category: Annotated[
        str, typer.Option("--category", "-c", help="Category name")
    ] = "default",
    day: Annotated[
        datetime | None,
        typer.Option(
            "--date", "-d", formats=["%Y-%m-%d"], help="Date (default: today)"
        ),
    ] = None,
) -> None:
    """Add an event to a day file."""
    ctx = get_context()
    renderer = SummaryRenderer()
    day_date = day.date() if day else date.today()

    if "|" in name or "\n" in name:
        renderer.render_error("event name must not contain '|' or newlines")
        raise typer.Exit(2)

    if "|" in category or "\n" in category:
        renderer.render_error("category name must not contain '|' or newlines")
        raise typer.Exit(2)

    if category not in ctx.registry:
        logger.warning(f"Category '{category}' is not configured, using priority 0")

    try:
        if start is None:
            start_ts = Timestamp.now().snap(ctx.config.snap_resolution)
        else:
            start_ts = Timestamp.parse(start)
        event = Event(
            start=start_ts,
            end=Timestamp.parse(end),
            name=name,
            category=ctx.registry.resolve(category),
        )
        planned_day = ctx.storage.load_day(day_date, ctx.registry)
        planned_day.add_event(event)
        path = ctx.storage.save_day(planned_day)
    except DayplanError as e:
        logger.error(f"Add failed: {e}")
        renderer.render_error(str(e))
        raise typer.Exit(1)

    logger.info(f"Added {event} to {path}")
    console.print(
        f"Added [cyan]{escape(event.to_record())}[/cyan] to {day_date}", highlight=False
    )
