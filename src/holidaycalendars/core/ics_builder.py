"""ICS export of holiday calendars."""

import logging

from icalendar import Calendar as ICalCalendar, Event as ICalEvent, vText

from holidaycalendars.config.constants import ICS_CALSCALE, ICS_PRODID, ICS_VERSION
from holidaycalendars.core.calendar_model import Calendar
from holidaycalendars.core.event_model import Event

logger = logging.getLogger(__name__)


class vRawText(vText):
    """Text value written exactly as given, without RFC 5545 escaping."""

    def to_ical(self) -> bytes:
        return str(self).encode(self.encoding)


def build_ics(calendar: Calendar) -> str:
    """Serialize a calendar to iCalendar text.

    Each event becomes an all-day VEVENT whose DTSTART and DTEND are the
    event's date. Only DTEND, DTSTART and SUMMARY are written, in that
    order; feed consumers depend on this exact layout.

    Args:
        calendar: The calendar to export.

    Returns:
        ICS content string with CRLF line endings.
    """
    cal = _create_ics_calendar()
    for event in calendar.events:
        cal.add_component(_create_ics_event(event))

    logger.debug(
        "Built ICS with %d event(s) for %s %s",
        len(calendar.events), calendar.division, calendar.year or "(all years)"
    )
    return _format_ics_output(cal)


def _create_ics_calendar() -> ICalCalendar:
    """Create a new ICS calendar with standard headers.

    Returns:
        A new Calendar object with required headers.
    """
    cal = ICalCalendar()
    cal.add("VERSION", ICS_VERSION)
    cal.add("PRODID", ICS_PRODID)
    cal.add("CALSCALE", ICS_CALSCALE)
    return cal


def _create_ics_event(event: Event) -> ICalEvent:
    """Create an all-day ICS event component.

    Args:
        event: The event to convert.

    Returns:
        An Event component ready to add to a calendar.
    """
    ve = ICalEvent()
    # A date value is written as VALUE=DATE
    ve.add("DTEND", event.date)
    ve.add("DTSTART", event.date)
    ve.add("SUMMARY", vRawText(event.title))
    return ve


def _format_ics_output(cal: ICalCalendar) -> str:
    """Format calendar to ICS string with proper line endings.

    Properties are emitted in insertion order rather than icalendar's
    canonical order, and folded lines are joined back so every property
    sits on a single line.

    Args:
        cal: The Calendar object to format.

    Returns:
        ICS content string with CRLF line endings.
    """
    raw_ical = cal.to_ical(sorted=False)
    decoded_ical = raw_ical.decode("utf-8", errors="replace")
    # icalendar folds long lines as CRLF followed by a single space
    decoded_ical = decoded_ical.replace("\r\n ", "")
    # Ensure CRLF line endings per RFC5545
    crlf_ical = decoded_ical.replace("\r\n", "\n").replace("\n", "\r\n")
    return crlf_ical
