"""Day model: the ordered events of one date and overlap resolution."""

import datetime as dt
import logging
from typing import Callable

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from dayplan.exceptions import (
    DayplanError,
    EventNotFoundError,
    IllegalMoveError,
    IllegalResizeError,
    InvalidDurationError,
    InvalidSplitPointError,
    InvalidTimeRangeError,
)
from dayplan.models.category import Category
from dayplan.models.event import Event
from dayplan.models.timesheet import TimesheetEntry
from dayplan.models.timestamp import Timestamp

logger = logging.getLogger(__name__)


def event_order_key(event: Event) -> tuple[int, int]:
    """Sort key: start ascending, then later end first.

    An outer event thereby precedes an inner one starting at the same time.
    """
    return (event.start.to_minutes(), -event.end.to_minutes())


class Day(BaseModel):
    """The events of a single date plus a "current event" cursor.

    `events` is kept sorted by `event_order_key` after every mutating call.
    The cursor is stored as an index and is either unset or points at a
    member of `events`. Callers must serialize mutations of one Day.
    """

    date: dt.date | None = None
    events: list[Event] = Field(default_factory=list)

    _current_index: int | None = PrivateAttr(default=None)

    @field_validator("events")
    @classmethod
    def validate_events(cls, v: list[Event]) -> list[Event]:
        """Refuse empty, inverted or repeated events and establish the order."""
        seen: set[int] = set()
        for event in v:
            if not event.end.is_after(event.start):
                raise ValueError(f"refusing to add non-positive length event {event}")
            if id(event) in seen:
                raise ValueError(f"event {event} is already part of this day")
            seen.add(id(event))
        return sorted(v, key=event_order_key)

    # Cursor

    @property
    def current(self) -> Event | None:
        """The currently selected event, if any."""
        if self._current_index is None:
            return None
        if not 0 <= self._current_index < len(self.events):
            raise EventNotFoundError(
                f"current index {self._current_index} dangles "
                f"({len(self.events)} events)"
            )
        return self.events[self._current_index]

    def set_current(self, event: Event | None) -> None:
        """Select an event of this day, or clear the selection."""
        self._current_index = None if event is None else self._index_of(event)

    def current_next(self) -> None:
        """Select the following event; selects the first if nothing is selected."""
        if self._current_index is None:
            if self.events:
                self._current_index = 0
            return
        if self._current_index + 1 < len(self.events):
            self._current_index += 1

    def current_prev(self) -> None:
        """Select the preceding event; selects the first if nothing is selected."""
        if self._current_index is None:
            if self.events:
                self._current_index = 0
            return
        if self._current_index > 0:
            self._current_index -= 1

    # Lookup

    def _index_of(self, event: Event) -> int:
        for i, candidate in enumerate(self.events):
            if candidate is event:
                return i
        raise EventNotFoundError(f"event {event} not found in day")

    def __contains__(self, event: Event) -> bool:
        return any(candidate is event for candidate in self.events)

    def get_events_from(self, event: Event) -> list[Event]:
        """The event and all events sorted after it."""
        return self.events[self._index_of(event) :]

    def _get_events_after(self, event: Event) -> list[Event]:
        return self.events[self._index_of(event) + 1 :]

    def _get_events_before(self, event: Event) -> list[Event]:
        """Preceding events, nearest first."""
        return list(reversed(self.events[: self._index_of(event)]))

    def get_prev_event_before(self, t: Timestamp) -> Event | None:
        """Last event ending strictly before t."""
        for event in reversed(self.events):
            if t.is_after(event.end):
                return event
        return None

    def get_next_event_after(self, t: Timestamp) -> Event | None:
        """First event starting strictly after t."""
        for event in self.events:
            if event.start.is_after(t):
                return event
        return None

    # Mutation

    def update_event_order(self) -> None:
        """Re-sort events, keeping the cursor on the same event."""
        current = self.current
        self.events.sort(key=event_order_key)
        if current is not None:
            self._current_index = self._index_of(current)

    def add_event(self, event: Event) -> None:
        """Insert an event and select it."""
        if not event.end.is_after(event.start):
            raise InvalidDurationError(
                f"refusing to add non-positive length event {event}"
            )
        if event in self:
            raise DayplanError(f"event {event} is already part of this day")
        self.events.append(event)
        self._current_index = len(self.events) - 1
        self.update_event_order()
        logger.debug(f"Added event {event}")

    def remove_event(self, event: Event) -> None:
        """Remove an event, moving the cursor off it if it was selected."""
        index = self._index_of(event)
        del self.events[index]

        if self._current_index is not None:
            if self._current_index == index:
                if index < len(self.events):
                    self._current_index = index
                elif self.events:
                    self._current_index = len(self.events) - 1
                else:
                    self._current_index = None
            elif self._current_index > index:
                self._current_index -= 1
        logger.debug(f"Removed event {event}")

    def split_event(self, event: Event, t: Timestamp) -> Event:
        """Split event at t into [start, t) and [t, end); returns the second half."""
        self._index_of(event)
        if not (t.is_after(event.start) and event.end.is_after(t)):
            raise InvalidSplitPointError(f"timestamp {t} outside event {event}")

        second = Event(start=t, end=event.end, name=event.name, category=event.category)
        event.end = t
        self.add_event(second)
        logger.debug(f"Split event at {t} into {event} and {second}")
        return second

    def set_times(self, event: Event, start: Timestamp, end: Timestamp) -> None:
        """Set both times of an event."""
        if not end.is_after(start):
            raise InvalidTimeRangeError(f"start {start} is not before end {end}")
        self._index_of(event)
        event.start = start
        event.end = end
        self.update_event_order()

    def move_event_by(self, event: Event, minutes: int, snap_resolution: int) -> None:
        self._index_of(event)
        event.move_by(minutes, snap_resolution)
        self.update_event_order()

    def move_event_to(self, event: Event, new_start: Timestamp) -> None:
        self._index_of(event)
        event.move_to(new_start)
        self.update_event_order()

    def resize_event_by(self, event: Event, delta: int) -> None:
        self._index_of(event)
        event.resize_by(delta)
        self.update_event_order()

    def resize_event_to(self, event: Event, new_end: Timestamp) -> None:
        self.resize_event_by(event, event.end.duration_in_minutes_until(new_end))

    def move_events_pushing_by(
        self, event: Event, minutes: int, snap_resolution: int
    ) -> None:
        """Move an event, pushing along neighbours it would run into.

        Moving forward drags every following event that starts before the
        moved end of its predecessor; moving backward does the same for
        preceding events. Either every affected event moves or none does.
        """
        if minutes == 0:
            return
        if not event.can_move_by(minutes, snap_resolution):
            raise IllegalMoveError(f"cannot move event {event} by {minutes}")

        to_move = [event]
        if minutes > 0:
            last_end = event.end.offset_minutes(minutes).snap(snap_resolution)
            for follower in self._get_events_after(event):
                if not follower.start.is_before(last_end):
                    break
                if not follower.can_move_by(minutes, snap_resolution):
                    raise IllegalMoveError(f"cannot move event {follower} by {minutes}")
                to_move.append(follower)
                last_end = follower.end.offset_minutes(minutes).snap(snap_resolution)
        else:
            last_start = event.start.offset_minutes(minutes).snap(snap_resolution)
            for preceding in self._get_events_before(event):
                if not preceding.end.is_after(last_start):
                    break
                if not preceding.can_move_by(minutes, snap_resolution):
                    raise IllegalMoveError(
                        f"cannot move event {preceding} by {minutes}"
                    )
                to_move.append(preceding)
                last_start = preceding.start.offset_minutes(minutes).snap(
                    snap_resolution
                )

        for e in to_move:
            e.move_by(minutes, snap_resolution)
        self.update_event_order()
        logger.debug(f"Moved {len(to_move)} events by {minutes} min")

    def snap_end(self, event: Event, resolution: int) -> None:
        """Snap only the end of an event to the grid."""
        self._index_of(event)
        new_end = event.end.snap(resolution)
        step = 60 // resolution
        if abs(new_end.duration_in_minutes_until(event.end)) > step or not (
            new_end.is_after(event.start)
        ):
            raise IllegalResizeError(
                f"snapping {event} to resolution {resolution} is illegal "
                f"(would snap end to {new_end})"
            )
        event.end = new_end
        self.update_event_order()

    # Derived views

    def clone(self) -> "Day":
        """Independent copy; events are cloned and re-added."""
        cloned = Day(date=self.date)
        for event in self.events:
            cloned.add_event(event.clone())
        cloned._current_index = self._current_index
        return cloned

    def to_records(self) -> list[str]:
        """Serialized events in order."""
        return [event.to_record() for event in self.events]

    def flatten(self) -> "Day":
        """Resolve overlaps on a copy, leaving this day untouched.

        The result partitions the covered time into non-overlapping segments,
        each attributed to one category. A higher-priority event cuts into or
        splits a lower-priority one:

            +-------+         +-------+
            | a     |         | a     |    (a lower prio than B)
            |   +-----+       +-------+
            |   | B   |  ~~>  | B     |
            |   +-----+       +-------+
            |       |         | a     |
            +-------+         +-------+

        Otherwise the earlier event keeps the overlap: a contained event is
        dropped, a same-category overlap is merged, and a different-category
        one has its start pushed back. Flush neighbours are left alone.
        """
        flattened = self.clone()
        flatten_events(flattened.events)
        flattened._current_index = None
        logger.debug(
            f"Flattened {len(self.events)} events into {len(flattened.events)} segments"
        )
        return flattened

    def sum_up_by_category(self) -> dict[Category, int]:
        """Minutes per category, counting overlapping time only once."""
        result: dict[Category, int] = {}
        for event in self.flatten().events:
            result[event.category] = result.get(event.category, 0) + event.duration()
        return result

    def get_timesheet_entry(self, matcher: Callable[[str], bool]) -> TimesheetEntry:
        """Clock-in, breaks and clock-out over segments whose category matches.

        Days without a matching segment give an empty entry.
        """
        first_start: Timestamp | None = None
        last_end: Timestamp | None = None
        break_minutes = 0

        for segment in self.flatten().events:
            if not matcher(segment.category.name):
                continue
            if first_start is None:
                first_start = segment.start
            else:
                break_minutes += last_end.duration_in_minutes_until(segment.start)
            last_end = segment.end

        if first_start is None:
            midnight = Timestamp(hour=0, minute=0)
            return TimesheetEntry(start=midnight, end=midnight)
        return TimesheetEntry(start=first_start, break_minutes=break_minutes, end=last_end)


def flatten_events(events: list[Event]) -> None:
    """Resolve overlaps in a list of events in place.

    Sweeps two adjacent cursors over the list, re-sorting before every step
    since trims and appended remainders can reorder neighbours. A cursor
    stays put after a deletion so the newly adjacent pair is examined.
    """
    if len(events) < 2:
        return

    current, next_ = 0, 1
    while current < len(events) and next_ < len(events):
        events.sort(key=event_order_key)
        cur, nxt = events[current], events[next_]

        if nxt.is_contained_in(cur):
            if nxt.category.priority > cur.category.priority:
                remainder = cur.clone()
                remainder.start = nxt.end
                cur.end = nxt.start

                if remainder.duration() > 0:
                    events.append(remainder)

                if cur.duration() == 0:
                    del events[current]
                else:
                    current, next_ = next_, next_ + 1
            else:
                # equal or lower priority contributes no time
                del events[next_]

        elif nxt.starts_during(cur):
            if nxt.category.priority > cur.category.priority:
                cur.end = nxt.start
                if cur.duration() == 0:
                    del events[current]
                else:
                    current, next_ = next_, next_ + 1
            elif nxt.category.name == cur.category.name:
                cur.end = nxt.end
                del events[next_]
            else:
                nxt.start = cur.end

        else:
            current, next_ = next_, next_ + 1

    events.sort(key=event_order_key)
