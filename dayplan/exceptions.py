"""Exception hierarchy for day planner operations."""


class DayplanError(Exception):
    """Base exception for recoverable day planner conditions."""

    pass


class InvalidDurationError(DayplanError):
    """Event end is not strictly after its start."""

    pass


class IllegalMoveError(DayplanError):
    """Move would cross the day boundary or be swallowed by snapping."""

    pass


class IllegalResizeError(DayplanError):
    """Resize would cross the day boundary, invert, or not change the event."""

    pass


class InvalidSplitPointError(DayplanError):
    """Split timestamp is not strictly inside the event."""

    pass


class InvalidTimeRangeError(DayplanError):
    """Start is not strictly before end."""

    pass


class InvalidTimestampError(DayplanError, ValueError):
    """String does not fit the HH:MM format."""

    pass


class InvalidRecordError(DayplanError, ValueError):
    """Event record is not of the form start|end|category|name."""

    pass


class CategoryNotFoundError(DayplanError):
    """Category not known to the registry."""

    pass


class CategoryConflictError(DayplanError):
    """Category name already registered with a different priority."""

    pass


class DayFileError(DayplanError):
    """Error reading or writing a day file."""

    pass


class EventNotFoundError(LookupError):
    """Event is not part of the day.

    Raised on caller misuse. Not a DayplanError, so handlers for
    recoverable conditions do not catch it.
    """

    pass
