"""Day file storage: one start|end|category|name record per line."""

import logging
from datetime import date, timedelta
from pathlib import Path

from dayplan.config import DayplanConfig
from dayplan.exceptions import DayFileError, DayplanError
from dayplan.models.category import CategoryRegistry
from dayplan.models.day import Day
from dayplan.models.event import Event

logger = logging.getLogger(__name__)


class DayFileHandler:
    """Reads and writes the file of a single date."""

    def __init__(self, path: Path):
        self.path = path

    def read(self, registry: CategoryRegistry, day_date: date | None = None) -> Day:
        """Read the day; a missing file is an empty day."""
        day = Day(date=day_date)
        if not self.path.exists():
            logger.debug(f"No day file at {self.path}")
            return day

        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise DayFileError(f"Cannot read day file {self.path}: {e}") from e

        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                day.add_event(Event.from_record(line, registry))
            except DayplanError as e:
                raise DayFileError(f"{self.path}:{line_no}: {e}") from e

        day.set_current(None)
        logger.debug(f"Read {len(day.events)} events from {self.path}")
        return day

    def write(self, day: Day) -> None:
        """Write all events of the day, replacing the file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        records = day.to_records()
        content = "\n".join(records) + "\n" if records else ""
        try:
            self.path.write_text(content, encoding="utf-8")
        except (OSError, UnicodeEncodeError) as e:
            raise DayFileError(f"Cannot write day file {self.path}: {e}") from e
        logger.debug(f"Wrote {len(records)} events to {self.path}")


class DayStorage:
    """Access to the day files under the configured home directory."""

    def __init__(self, config: DayplanConfig | None = None):
        self.config = config or DayplanConfig()

    def handler(self, day_date: date) -> DayFileHandler:
        return DayFileHandler(self.config.day_path(day_date))

    def load_day(self, day_date: date, registry: CategoryRegistry) -> Day:
        return self.handler(day_date).read(registry, day_date)

    def save_day(self, day: Day) -> Path:
        """Save a dated day, returning the file path."""
        if day.date is None:
            raise DayplanError("Cannot save a day without a date")
        handler = self.handler(day.date)
        handler.write(day)
        return handler.path

    def load_range(
        self, from_date: date, til_date: date, registry: CategoryRegistry
    ) -> list[Day]:
        """Load every date from from_date through til_date (inclusive)."""
        if til_date < from_date:
            raise DayplanError(f"Range end {til_date} is before start {from_date}")
        days = []
        current = from_date
        while current <= til_date:
            days.append(self.load_day(current, registry))
            current += timedelta(days=1)
        return days
