"""Minute-precision time-of-day model."""

from datetime import datetime, time

from pydantic import BaseModel, ConfigDict, Field

from dayplan.constants import HOURS_PER_DAY, MINUTES_PER_HOUR
from dayplan.exceptions import InvalidTimestampError


class TimeOffset(BaseModel):
    """An unsigned hours/minutes offset with a direction."""

    model_config = ConfigDict(frozen=True)

    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0, le=59)
    add: bool = True


class Timestamp(BaseModel):
    """Wall-clock time of day at minute precision.

    Immutable; all arithmetic returns new instances. Offsets wrap around
    midnight, so 00:10 offset by -60 minutes is 23:10.
    """

    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)

    @classmethod
    def parse(cls, s: str) -> "Timestamp":
        """Parse a strict HH:MM string."""
        components = s.split(":")
        if len(components) != 2:
            raise InvalidTimestampError(f"'{s}' does not fit the HH:MM format")
        h_str, m_str = components
        if len(h_str) != 2 or len(m_str) != 2 or not (h_str + m_str).isdigit():
            raise InvalidTimestampError(f"'{s}' does not fit the HH:MM format")
        hour, minute = int(h_str), int(m_str)
        if hour > 23 or minute > 59:
            raise InvalidTimestampError(
                f"'{s}' is out of range (hour {hour}, minute {minute})"
            )
        return cls(hour=hour, minute=minute)

    @classmethod
    def from_minutes(cls, minutes: int) -> "Timestamp":
        """Build from minutes since midnight, wrapping into a single day."""
        minutes %= HOURS_PER_DAY * MINUTES_PER_HOUR
        return cls(hour=minutes // MINUTES_PER_HOUR, minute=minutes % MINUTES_PER_HOUR)

    @classmethod
    def from_time(cls, value: time | datetime) -> "Timestamp":
        """Take hour and minute of a datetime.time or datetime."""
        return cls(hour=value.hour, minute=value.minute)

    @classmethod
    def now(cls) -> "Timestamp":
        return cls.from_time(datetime.now())

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def to_minutes(self) -> int:
        """Minutes since 00:00."""
        return self.hour * MINUTES_PER_HOUR + self.minute

    def is_after(self, other: "Timestamp") -> bool:
        """Strictly later than other."""
        if self.hour != other.hour:
            return self.hour > other.hour
        return self.minute > other.minute

    def is_before(self, other: "Timestamp") -> bool:
        """Strictly earlier than other."""
        return other.is_after(self)

    def offset(self, o: TimeOffset) -> "Timestamp":
        """Offset by o, wrapping around midnight in both directions."""
        if o.add:
            hour = (
                self.hour + o.hours + (self.minute + o.minutes) // MINUTES_PER_HOUR
            ) % HOURS_PER_DAY
            minute = (self.minute + o.minutes) % MINUTES_PER_HOUR
        else:
            borrow = 1 if self.minute - o.minutes < 0 else 0
            hour = (self.hour - o.hours - borrow + HOURS_PER_DAY) % HOURS_PER_DAY
            minute = (self.minute - o.minutes + MINUTES_PER_HOUR) % MINUTES_PER_HOUR
        return Timestamp(hour=hour, minute=minute)

    def offset_minutes(self, minutes: int) -> "Timestamp":
        """Offset by a signed number of minutes."""
        magnitude = abs(minutes)
        return self.offset(
            TimeOffset(
                hours=magnitude // MINUTES_PER_HOUR,
                minutes=magnitude % MINUTES_PER_HOUR,
                add=minutes >= 0,
            )
        )

    def snap(self, resolution: int) -> "Timestamp":
        """Round the minute to the nearest of `resolution` grid lines per hour.

        Ties round down. Rounding up to the full hour carries into the hour,
        and 23:5x carried past midnight wraps to 00:00.
        """
        if not 1 <= resolution <= MINUTES_PER_HOUR:
            raise ValueError(f"snap resolution must be in 1..60, got {resolution}")
        step = MINUTES_PER_HOUR // resolution
        lower = self.minute - self.minute % step
        upper = lower + step

        closest = lower
        if upper <= MINUTES_PER_HOUR and upper - self.minute < self.minute - lower:
            closest = upper

        if closest == MINUTES_PER_HOUR:
            return Timestamp(hour=(self.hour + 1) % HOURS_PER_DAY, minute=0)
        return Timestamp(hour=self.hour, minute=closest)

    def duration_in_minutes_until(self, other: "Timestamp") -> int:
        """Signed minutes from self to other; negative if other is earlier."""
        return other.to_minutes() - self.to_minutes()

    def legal(self) -> bool:
        """Bounds check for both fields."""
        return 0 <= self.hour < HOURS_PER_DAY and 0 <= self.minute < MINUTES_PER_HOUR
