"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import add_command, summarize_command, timesheet_command
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Day planner: per-category time summaries and timesheets.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Verbose output")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only show errors")
    ] = False,
) -> None:
    """Set up the shared context and logging for every command."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    logger.debug(f"Using dayplan home {ctx.config.home_dir}")


app.command("summarize")(summarize_command)
app.command("timesheet")(timesheet_command)
app.command("add")(add_command)
