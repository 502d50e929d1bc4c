"""Produce a timesheet for the categories matching a filter."""

import logging
from datetime import datetime

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.summary_renderer import SummaryRenderer
from cli.display.timesheet_renderer import TimesheetRenderer
from dayplan.exceptions import DayplanError
from dayplan.summary import build_category_matcher, build_timesheet

logger = logging.getLogger(__name__)


def timesheet_command(
    from_day: Annotated[
        datetime,
        typer.Option("--from", "-f", formats=["%Y-%m-%d"], help="First day"),
    ],
    til_day: Annotated[
        datetime,
        typer.Option("--til", "-t", formats=["%Y-%m-%d"], help="Last day (inclusive)"),
    ],
    include: Annotated[
        str | None,
        typer.Option(
            "--category-include-filter", "-i", help="Regex of categories to include"
        ),
    ] = None,
    exclude: Annotated[
        str | None,
        typer.Option(
            "--category-exclude-filter", "-e", help="Regex of categories to exclude"
        ),
    ] = None,
    include_empty: Annotated[
        bool,
        typer.Option("--include-empty", help="Also list days without matching time"),
    ] = False,
    separator: Annotated[
        str,
        typer.Option("--separator", help="CSV field separator"),
    ] = ",",
    quote: Annotated[
        bool,
        typer.Option("--enquote", help="Add quotes around field values"),
    ] = False,
    date_format: Annotated[
        str,
        typer.Option("--date-format", help="strftime format of the date column"),
    ] = "%Y-%m-%d",
) -> None:
    """Print <date>,<start>,<break>,<end> lines for matching categories.

    Each line spans the first to the last matching time of the day, with the
    gaps in between summed up as break time.
    """
    ctx = get_context()
    error_renderer = SummaryRenderer()

    if not include and not exclude:
        error_renderer.render_error(
            "at least one of --category-include-filter/-i and "
            "--category-exclude-filter/-e is required"
        )
        raise typer.Exit(2)

    try:
        matcher = build_category_matcher(include, exclude)
        days = ctx.storage.load_range(from_day.date(), til_day.date(), ctx.registry)
    except DayplanError as e:
        logger.error(f"Timesheet failed: {e}")
        error_renderer.render_error(str(e))
        raise typer.Exit(1)

    renderer = TimesheetRenderer(separator=separator, quote=quote, date_format=date_format)
    if ctx.verbose:
        renderer.render_matches(
            [category.name for category in ctx.registry if matcher(category.name)]
        )

    rows = build_timesheet(days, matcher, include_empty=include_empty)
    renderer.render_rows(rows)
