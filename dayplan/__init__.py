"""Day planner event model and overlap resolution."""

from dayplan.models import Category, CategoryRegistry, Day, Event, Timestamp

__all__ = ["Category", "CategoryRegistry", "Day", "Event", "Timestamp"]
