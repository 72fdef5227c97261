"""Core business logic for holidaycalendars."""

from holidaycalendars.core.event_model import Event
from holidaycalendars.core.calendar_model import Calendar
from holidaycalendars.core.combiner import combine, combine_inside_division
from holidaycalendars.core.upcoming import is_event_today, should_show_bunting, upcoming_event
from holidaycalendars.core.ics_builder import build_ics
from holidaycalendars.core.repository import CalendarDocument, DivisionCalendars, Repository

__all__ = [
    "Event",
    "Calendar",
    "combine",
    "combine_inside_division",
    "upcoming_event",
    "is_event_today",
    "should_show_bunting",
    "build_ics",
    "CalendarDocument",
    "DivisionCalendars",
    "Repository",
]
