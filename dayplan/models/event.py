"""Event model: a named, categorized half-open time interval."""

from typing import TYPE_CHECKING

from pydantic import BaseModel

from dayplan.constants import MINUTE_RESOLUTION, MINUTES_PER_DAY, RECORD_SEPARATOR
from dayplan.exceptions import IllegalMoveError, IllegalResizeError, InvalidRecordError
from dayplan.models.category import Category
from dayplan.models.timestamp import Timestamp

if TYPE_CHECKING:
    from dayplan.models.category import CategoryRegistry


class Event(BaseModel):
    """An interval [start, end) within one day.

    Construction does not require end to be after start; a Day refuses
    such events on insertion. Events are compared by identity inside a
    Day, so two events with equal fields are still distinct members.
    """

    start: Timestamp
    end: Timestamp
    name: str
    category: Category

    @classmethod
    def from_record(
        cls, record: str, registry: "CategoryRegistry | None" = None
    ) -> "Event":
        """Parse a start|end|category|name record.

        The name is everything after the third separator. Categories are
        looked up in the registry; unknown names get priority 0.
        """
        fields = record.rstrip("\n").split(RECORD_SEPARATOR, 3)
        if len(fields) != 4:
            raise InvalidRecordError(
                f"Record '{record}' does not fit the start|end|category|name format"
            )
        start_str, end_str, category_name, name = fields
        if registry is not None:
            category = registry.resolve(category_name)
        else:
            category = Category(name=category_name)
        return cls(
            start=Timestamp.parse(start_str),
            end=Timestamp.parse(end_str),
            name=name,
            category=category,
        )

    def to_record(self) -> str:
        """Serialize to a start|end|category|name record."""
        return RECORD_SEPARATOR.join(
            [str(self.start), str(self.end), self.category.name, self.name]
        )

    def __str__(self) -> str:
        return self.to_record()

    def duration(self) -> int:
        """Length in minutes."""
        return self.start.duration_in_minutes_until(self.end)

    def clone(self) -> "Event":
        """Independent copy with the same fields."""
        return self.model_copy()

    def can_move_by(self, minutes: int, snap_resolution: int) -> bool:
        """Whether moving by minutes (start snapped) stays within the day.

        A nonzero move must actually move both snapped start and snapped end
        in its direction; otherwise it crossed midnight or snapping swallowed
        it. The moved event must also stay non-empty.
        """
        if abs(minutes) >= MINUTES_PER_DAY:
            return False
        if minutes == 0:
            return True

        new_start = self.start.offset_minutes(minutes).snap(snap_resolution)
        new_end = self.end.offset_minutes(minutes).snap(snap_resolution)
        if minutes > 0:
            moves_along = new_start.is_after(self.start) and new_end.is_after(self.end)
        else:
            moves_along = new_start.is_before(self.start) and new_end.is_before(
                self.end
            )
        if not moves_along:
            return False

        return self.end.offset_minutes(minutes).is_after(new_start)

    def move_by(self, minutes: int, snap_resolution: int) -> None:
        """Move by minutes, snapping the start; the end shifts by the raw delta."""
        if not self.can_move_by(minutes, snap_resolution):
            raise IllegalMoveError(
                f"Cannot move event {self} by {minutes} min "
                f"(snap resolution {snap_resolution})"
            )
        if minutes == 0:
            return
        self.start = self.start.offset_minutes(minutes).snap(snap_resolution)
        self.end = self.end.offset_minutes(minutes)

    def can_move_to(self, new_start: Timestamp) -> bool:
        """Whether the event can be moved to start at new_start (no snapping)."""
        return self.can_move_by(
            self.start.duration_in_minutes_until(new_start), MINUTE_RESOLUTION
        )

    def move_to(self, new_start: Timestamp) -> None:
        """Move to start at new_start, keeping the duration."""
        delta = self.start.duration_in_minutes_until(new_start)
        if not self.can_move_by(delta, MINUTE_RESOLUTION):
            raise IllegalMoveError(f"Cannot move event {self} to {new_start}")
        self.move_by(delta, MINUTE_RESOLUTION)

    def can_be_resized_by(self, delta: int) -> bool:
        """Whether shifting the end by delta minutes actually grows or shrinks it."""
        if abs(delta) >= MINUTES_PER_DAY:
            return False
        if delta == 0:
            return True

        new_end = self.end.offset_minutes(delta)
        if delta > 0:
            return new_end.is_after(self.end)
        return new_end.is_after(self.start) and new_end.is_before(self.end)

    def resize_by(self, delta: int) -> None:
        """Shift the end by delta minutes."""
        if not self.can_be_resized_by(delta):
            raise IllegalResizeError(f"Cannot resize event {self} by {delta} min")
        self.end = self.end.offset_minutes(delta)

    def snap(self, resolution: int) -> None:
        """Snap start and end independently."""
        self.start = self.start.snap(resolution)
        self.end = self.end.snap(resolution)

    def starts_during(self, other: "Event") -> bool:
        """Whether this event starts within other.

        Starting together with other counts; starting at other's end does not.
        """
        if other.start.is_after(self.start):
            return False
        return other.end.is_after(self.start)

    def is_contained_in(self, other: "Event") -> bool:
        """Whether this event lies entirely within other."""
        return self.starts_during(other) and not self.end.is_after(other.end)
