"""Summarize time per category over a range of days."""

import logging
from datetime import datetime

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.summary_renderer import SummaryRenderer
from dayplan.exceptions import DayplanError
from dayplan.summary import summarize_days

logger = logging.getLogger(__name__)


def summarize_command(
    from_day: Annotated[
        datetime,
        typer.Option(
            "--from", "-f", formats=["%Y-%m-%d"], help="First day to summarize"
        ),
    ],
    til_day: Annotated[
        datetime,
        typer.Option(
            "--til", "-t", formats=["%Y-%m-%d"], help="Last day to summarize (inclusive)"
        ),
    ],
    human_readable: Annotated[
        bool,
        typer.Option("--human-readable", help="Format times as hours and minutes"),
    ] = False,
    category_filter: Annotated[
        str | None,
        typer.Option(
            "--category-filter",
            metavar="CAT1,CAT2,...",
            help="Only include the named categories (all if omitted)",
        ),
    ] = None,
) -> None:
    """Summarize time per category, counting overlapping events only once."""
    ctx = get_context()
    renderer = SummaryRenderer()

    filter_names = None
    if category_filter:
        filter_names = {name.strip() for name in category_filter.split(",") if name.strip()}

    try:
        days = ctx.storage.load_range(from_day.date(), til_day.date(), ctx.registry)
    except DayplanError as e:
        logger.error(f"Summarize failed: {e}")
        renderer.render_error(str(e))
        raise typer.Exit(1)

    summary = summarize_days(days, category_filter=filter_names)
    logger.info(f"Summarized {summary.day_count} days")

    renderer.render_summary(
        summary,
        from_day.date(),
        til_day.date(),
        human_readable=human_readable,
        category_filter=filter_names,
        verbose=ctx.verbose,
    )
