"""Tests for the Timestamp model."""

import pytest
from pydantic import ValidationError

from dayplan.exceptions import DayplanError, InvalidTimestampError
from dayplan.models.timestamp import TimeOffset, Timestamp


def ts(s: str) -> Timestamp:
    return Timestamp.parse(s)


def test_parse_and_format():
    """Test HH:MM parsing and zero-padded formatting."""
    t = ts("05:07")
    assert t.hour == 5
    assert t.minute == 7
    assert str(t) == "05:07"
    assert str(ts("23:59")) == "23:59"


@pytest.mark.parametrize("s", ["5:07", "05-07", "05:7", "24:00", "12:60", "ab:cd", ""])
def test_parse_rejects_malformed(s):
    """Test strict HH:MM parsing."""
    with pytest.raises(InvalidTimestampError):
        ts(s)


def test_invalid_timestamp_error_is_value_error():
    """Test that parse errors are both DayplanError and ValueError."""
    with pytest.raises(ValueError):
        ts("nope")
    with pytest.raises(DayplanError):
        ts("nope")


def test_construction_validates_bounds():
    """Test pydantic bounds validation."""
    with pytest.raises(ValidationError):
        Timestamp(hour=24, minute=0)
    with pytest.raises(ValidationError):
        Timestamp(hour=0, minute=60)


def test_value_semantics():
    """Test equality, hashing and immutability."""
    assert ts("10:10") == Timestamp(hour=10, minute=10)
    assert len({ts("10:10"), Timestamp(hour=10, minute=10)}) == 1
    with pytest.raises(ValidationError):
        ts("10:10").hour = 11


def test_to_minutes_and_from_minutes():
    """Test conversion to and from minutes since midnight."""
    assert ts("00:00").to_minutes() == 0
    assert ts("01:30").to_minutes() == 90
    assert Timestamp.from_minutes(90) == ts("01:30")
    assert Timestamp.from_minutes(1440 + 10) == ts("00:10")


def test_ordering():
    """Test strict before/after comparisons."""
    assert ts("10:11").is_after(ts("10:10"))
    assert ts("11:00").is_after(ts("10:59"))
    assert not ts("10:10").is_after(ts("10:10"))
    assert not ts("09:59").is_after(ts("10:00"))
    assert ts("09:59").is_before(ts("10:00"))
    assert not ts("10:00").is_before(ts("10:00"))


@pytest.mark.parametrize(
    "start, offset, expected",
    [
        ("10:10", TimeOffset(hours=0, minutes=0, add=True), "10:10"),
        ("10:10", TimeOffset(hours=0, minutes=0, add=False), "10:10"),
        ("10:10", TimeOffset(hours=1, minutes=0, add=True), "11:10"),
        ("10:10", TimeOffset(hours=1, minutes=0, add=False), "09:10"),
        ("10:10", TimeOffset(hours=0, minutes=49, add=True), "10:59"),
        ("10:10", TimeOffset(hours=0, minutes=50, add=True), "11:00"),
        ("10:10", TimeOffset(hours=0, minutes=51, add=True), "11:01"),
        ("00:10", TimeOffset(hours=1, minutes=0, add=False), "23:10"),
        ("23:10", TimeOffset(hours=1, minutes=0, add=True), "00:10"),
        ("01:30", TimeOffset(hours=2, minutes=40, add=False), "22:50"),
        ("22:30", TimeOffset(hours=2, minutes=40, add=True), "01:10"),
    ],
)
def test_offset(start, offset, expected):
    """Test offsetting wraps around midnight in both directions."""
    assert ts(start).offset(offset) == ts(expected)


def test_offset_minutes_wraps():
    """Test signed minute offsets wrap modulo a day."""
    assert ts("00:10").offset_minutes(-60) == ts("23:10")
    assert ts("23:10").offset_minutes(60) == ts("00:10")
    assert ts("10:10").offset_minutes(1440) == ts("10:10")
    assert ts("10:10").offset_minutes(-1440 - 70) == ts("09:00")
    assert ts("10:10").offset_minutes(0) == ts("10:10")


@pytest.mark.parametrize(
    "start, resolution, expected",
    [
        ("10:07", 12, "10:05"),
        ("10:08", 12, "10:10"),
        ("10:10", 12, "10:10"),
        ("10:58", 12, "11:00"),
        ("10:05", 6, "10:00"),  # ties round down
        ("10:16", 4, "10:15"),
        ("10:53", 4, "11:00"),
        ("10:07", 60, "10:07"),
        ("10:29", 1, "10:00"),
        ("10:31", 1, "11:00"),
    ],
)
def test_snap(start, resolution, expected):
    """Test snapping to the nearest grid line."""
    assert ts(start).snap(resolution) == ts(expected)


def test_snap_wraps_past_midnight():
    """Test that rounding up 23:5x wraps to 00:00 instead of hour 24."""
    snapped = ts("23:58").snap(12)
    assert snapped == ts("00:00")
    assert snapped.legal()


@pytest.mark.parametrize("resolution", [0, -1, 61])
def test_snap_rejects_bad_resolution(resolution):
    """Test snap resolution bounds."""
    with pytest.raises(ValueError):
        ts("10:00").snap(resolution)


def test_duration_in_minutes_until_is_signed():
    """Test signed durations."""
    assert ts("10:00").duration_in_minutes_until(ts("11:30")) == 90
    assert ts("11:30").duration_in_minutes_until(ts("10:00")) == -90
    assert ts("10:00").duration_in_minutes_until(ts("10:00")) == 0


def test_legal():
    """Test the bounds check."""
    assert ts("00:00").legal()
    assert ts("23:59").legal()
    assert not Timestamp.model_construct(hour=24, minute=0).legal()
    assert not Timestamp.model_construct(hour=3, minute=-1).legal()
