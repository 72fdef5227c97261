"""Resolving the next event of a calendar and whether to show bunting."""

from datetime import date, timedelta
from typing import Optional

from holidaycalendars.config.constants import BUNTING_ENABLED
from holidaycalendars.core.calendar_model import Calendar
from holidaycalendars.core.event_model import Event


def upcoming_event(calendar: Calendar, today: Optional[date] = None) -> Optional[Event]:
    """Return the first event, in stored order, dated today or later.

    The events are scanned as stored rather than sorted, so an out-of-order
    list yields the first qualifying position, not the earliest date.

    Args:
        calendar: The calendar to scan.
        today: Reference date (default: today).

    Returns:
        The upcoming Event, or None when every event is in the past.
    """
    cutoff = (today or date.today()) - timedelta(days=1)
    for event in calendar.events:
        if event.date > cutoff:
            return event
    return None


def is_event_today(calendar: Calendar, today: Optional[date] = None) -> bool:
    """Check whether the upcoming event falls on ``today``."""
    today = today or date.today()
    event = upcoming_event(calendar, today)
    return event is not None and event.date == today


def should_show_bunting(calendar: Calendar, today: Optional[date] = None) -> bool:
    """Check whether today's event asks for bunting.

    Both conditions must hold: the upcoming event is today and its flag is
    exactly the string ``"true"``.
    """
    today = today or date.today()
    event = upcoming_event(calendar, today)
    return event is not None and event.date == today and event.bunting == BUNTING_ENABLED
