import pytest

from dayplan.models.category import Category, CategoryRegistry
from dayplan.models.day import Day
from dayplan.models.event import Event


@pytest.fixture
def registry():
    """Registry with a low-priority and a high-priority category."""
    return CategoryRegistry(
        [
            Category(name="eating", priority=0),
            Category(name="work", priority=20),
        ]
    )


@pytest.fixture
def make_event(registry):
    """Factory building events from start|end|category|name records."""

    def _make(record: str, reg: CategoryRegistry | None = None) -> Event:
        return Event.from_record(record, reg or registry)

    return _make


@pytest.fixture
def make_day(make_event):
    """Factory building a day from records via add_event."""

    def _make(*records: str, reg: CategoryRegistry | None = None) -> Day:
        day = Day()
        for record in records:
            day.add_event(make_event(record, reg))
        return day

    return _make


@pytest.fixture
def dayplan_home(tmp_path, monkeypatch):
    """Point DAYPLAN_HOME at a temporary directory."""
    for key in (
        "DAYPLAN_LOG_DIR",
        "DAYPLAN_LOG_FILENAME",
        "DAYPLAN_CATEGORIES_FILE",
        "DAYPLAN_SNAP_RESOLUTION",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DAYPLAN_HOME", str(tmp_path))
    return tmp_path
