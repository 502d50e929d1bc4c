"""CLI commands package."""

from cli.commands.add import add_command
from cli.commands.summarize import summarize_command
from cli.commands.timesheet import timesheet_command

__all__ = ["add_command", "summarize_command", "timesheet_command"]
