"""Shared constants for the day planner."""

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY

# Grid lines per hour used for snapping (12 -> 5 minute grid)
DEFAULT_SNAP_RESOLUTION = 12

# Resolution at which snapping is a no-op
MINUTE_RESOLUTION = 60

# Field separator of serialized event records
RECORD_SEPARATOR = "|"

DAY_FILE_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_HOME_DIR = "~/.config/dayplan"
DEFAULT_CATEGORIES_FILENAME = "categories.json"
DEFAULT_LOG_FILENAME = "dayplan.log"
