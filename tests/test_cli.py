"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from cli.parser import app
from dayplan.models.timestamp import Timestamp

runner = CliRunner()


@pytest.fixture
def home(dayplan_home):
    """Home directory with categories and two day files."""
    (dayplan_home / "categories.json").write_text(
        json.dumps([{"name": "eating", "priority": 0}, {"name": "work", "priority": 20}])
    )
    days_dir = dayplan_home / "days"
    days_dir.mkdir()
    (days_dir / "2026-01-05").write_text(
        "08:50|12:00|work|Morning\n"
        "12:00|12:45|eating|Lunch\n"
        "12:45|16:20|work|Afternoon\n"
    )
    (days_dir / "2026-01-06").write_text(
        "05:50|06:30|eating|Breakfast\n"
        "06:00|07:00|work|Early start\n"
    )
    return dayplan_home


def test_summarize(home):
    result = runner.invoke(app, ["summarize", "--from", "2026-01-06", "--til", "2026-01-06"])
    assert result.exit_code == 0
    assert "Time summary: 2026-01-06 to 2026-01-06" in result.output
    assert "eating" in result.output
    assert "10 min" in result.output
    assert "60 min" in result.output
    assert "Total: 70 min" in result.output


def test_summarize_human_readable(home):
    result = runner.invoke(
        app,
        ["summarize", "-f", "2026-01-05", "-t", "2026-01-06", "--human-readable"],
    )
    assert result.exit_code == 0
    assert "7h 45min" in result.output
    assert "0h 55min" in result.output
    assert "Total: 8h 40min" in result.output


def test_summarize_category_filter(home):
    result = runner.invoke(
        app,
        [
            "summarize",
            "--from",
            "2026-01-05",
            "--til",
            "2026-01-06",
            "--category-filter",
            "eating",
        ],
    )
    assert result.exit_code == 0
    assert "Total: 55 min" in result.output


def test_summarize_empty_range(home):
    result = runner.invoke(app, ["summarize", "--from", "2026-02-01", "--til", "2026-02-03"])
    assert result.exit_code == 0
    assert "No events in range" in result.output


def test_summarize_reversed_range(home):
    result = runner.invoke(app, ["summarize", "--from", "2026-01-06", "--til", "2026-01-05"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_summarize_broken_day_file(home):
    (home / "days" / "2026-01-07").write_text("not a record\n")
    result = runner.invoke(app, ["summarize", "--from", "2026-01-07", "--til", "2026-01-07"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_timesheet(home):
    result = runner.invoke(
        app, ["timesheet", "--from", "2026-01-05", "--til", "2026-01-07", "-i", "work"]
    )
    assert result.exit_code == 0
    assert "2026-01-05,08:50,45m,16:20" in result.output
    assert "2026-01-06,06:00,0m,07:00" in result.output
    assert "2026-01-07" not in result.output


def test_timesheet_options(home):
    result = runner.invoke(
        app,
        [
            "timesheet",
            "--from",
            "2026-01-05",
            "--til",
            "2026-01-07",
            "-e",
            "eat",
            "--include-empty",
            "--separator",
            ";",
            "--enquote",
            "--date-format",
            "%d.%m.%Y",
        ],
    )
    assert result.exit_code == 0
    assert '"05.01.2026";"08:50";"45m";"16:20"' in result.output
    assert '"07.01.2026";"00:00";"0m";"00:00"' in result.output


def test_timesheet_requires_a_filter(home):
    result = runner.invoke(app, ["timesheet", "--from", "2026-01-05", "--til", "2026-01-05"])
    assert result.exit_code == 2


def test_timesheet_invalid_regex(home):
    result = runner.invoke(
        app, ["timesheet", "--from", "2026-01-05", "--til", "2026-01-05", "-i", "(work"]
    )
    assert result.exit_code == 1


def test_add(home):
    result = runner.invoke(
        app,
        ["add", "Lunch", "-s", "12:00", "-e", "12:45", "-c", "eating", "-d", "2026-01-08"],
    )
    assert result.exit_code == 0
    assert "Added" in result.output
    assert (home / "days" / "2026-01-08").read_text() == "12:00|12:45|eating|Lunch\n"


def test_add_keeps_existing_events_sorted(home):
    result = runner.invoke(
        app,
        ["add", "Coffee", "-s", "07:30", "-e", "07:45", "-c", "eating", "-d", "2026-01-05"],
    )
    assert result.exit_code == 0
    assert (home / "days" / "2026-01-05").read_text().splitlines()[0] == (
        "07:30|07:45|eating|Coffee"
    )


@pytest.mark.parametrize(
    "start, end",
    [("12:45", "12:00"), ("12:00", "12:00"), ("12", "13:00")],
    ids=["inverted", "empty", "malformed"],
)
def test_add_invalid_times(home, start, end):
    result = runner.invoke(
        app, ["add", "Lunch", "-s", start, "-e", end, "-d", "2026-01-08"]
    )
    assert result.exit_code == 1
    assert not (home / "days" / "2026-01-08").exists()


def test_add_rejects_separator_in_name(home):
    result = runner.invoke(
        app, ["add", "a|b", "-s", "12:00", "-e", "12:45", "-d", "2026-01-08"]
    )
    assert result.exit_code == 2


def test_verbose_writes_log_file(home):
    result = runner.invoke(
        app, ["-v", "summarize", "--from", "2026-01-05", "--til", "2026-01-05"]
    )
    assert result.exit_code == 0
    assert "Days read: 1" in result.output
    assert (home / "logs" / "dayplan.log").exists()


def test_add_defaults_start_to_now(home, monkeypatch):
    """Test a missing start is taken from the clock, snapped to the grid."""
    monkeypatch.setenv("DAYPLAN_SNAP_RESOLUTION", "4")
    monkeypatch.setattr(Timestamp, "now", classmethod(lambda cls: cls(hour=9, minute=8)))
    result = runner.invoke(app, ["add", "Standup", "-e", "09:30", "-d", "2026-01-08"])
    assert result.exit_code == 0
    assert (home / "days" / "2026-01-08").read_text() == "09:15|09:30|default|Standup\n"


@pytest.mark.parametrize("category", ["a|b", "a\nb"])
def test_add_rejects_separator_in_category(home, category):
    result = runner.invoke(
        app, ["add", "Standup", "-s", "09:00", "-e", "09:30", "-c", category, "-d", "2026-01-08"]
    )
    assert result.exit_code == 2
    assert not (home / "days" / "2026-01-08").exists()


def test_summarize_undecodable_day_file(home):
    """Test a day file that is not UTF-8 is reported as an error."""
    (home / "days" / "2026-01-07").write_bytes(b"08:00|09:00|work|Caf\xe9\n")
    result = runner.invoke(app, ["summarize", "--from", "2026-01-07", "--til", "2026-01-07"])
    assert result.exit_code == 1
    assert "Error" in result.output
