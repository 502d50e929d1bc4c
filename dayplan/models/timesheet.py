"""Timesheet entry model."""

from pydantic import BaseModel, Field

from dayplan.models.timestamp import Timestamp


class TimesheetEntry(BaseModel):
    """One day of a timesheet: clock-in, total break time, clock-out."""

    start: Timestamp
    break_minutes: int = Field(default=0, ge=0)
    end: Timestamp

    def is_empty(self) -> bool:
        """True if nothing was clocked on this day."""
        return self.start == self.end

    def format_break(self) -> str:
        """Break as e.g. "45m" or "1h5m"."""
        hours, minutes = divmod(self.break_minutes, 60)
        if hours:
            return f"{hours}h{minutes}m"
        return f"{minutes}m"

    def to_fields(self) -> list[str]:
        return [str(self.start), self.format_break(), str(self.end)]

    def to_printable(self, separator: str = ",") -> str:
        """CSV form, e.g. 08:50,45m,16:20."""
        return separator.join(self.to_fields())
