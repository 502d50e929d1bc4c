"""Pydantic models for the day planner."""

from dayplan.models.category import Category, CategoryRegistry
from dayplan.models.day import Day, event_order_key, flatten_events
from dayplan.models.event import Event
from dayplan.models.timesheet import TimesheetEntry
from dayplan.models.timestamp import TimeOffset, Timestamp

__all__ = [
    "Category",
    "CategoryRegistry",
    "Day",
    "Event",
    "TimeOffset",
    "Timestamp",
    "TimesheetEntry",
    "event_order_key",
    "flatten_events",
]
