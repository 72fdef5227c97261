"""Merging per-year calendars into one calendar per division."""

import logging
from typing import Mapping

from holidaycalendars.core.calendar_model import Calendar
from holidaycalendars.exceptions.errors import CalendarNotFoundError

logger = logging.getLogger(__name__)


def combine_inside_division(calendars_by_year: Mapping[str, Calendar]) -> Calendar:
    """Concatenate a division's calendars into one calendar with no year.

    Events are appended in the mapping's iteration order and are not
    re-sorted, so the mapping must already iterate years ascending.

    Args:
        calendars_by_year: Mapping of year string to Calendar.

    Returns:
        A new Calendar carrying the division and every event.
    """
    if not calendars_by_year:
        return Calendar()

    # Every entry belongs to the same division
    first = next(iter(calendars_by_year.values()))
    combined = Calendar(
        division=first.division,
        events=tuple(event for calendar in calendars_by_year.values() for event in calendar.events),
    )

    logger.debug(
        "Combined %d calendar(s) for %s into %d event(s)",
        len(calendars_by_year), combined.division, len(combined.events)
    )
    return combined


def combine(grouped_by_division: Mapping, division: str) -> Calendar:
    """Re-run the merge for ``division`` against an existing grouping.

    Args:
        grouped_by_division: Mapping of division slug to DivisionCalendars.
        division: The division to merge.

    Returns:
        The merged Calendar.

    Raises:
        CalendarNotFoundError: If the division is not in the grouping.
    """
    if division not in grouped_by_division:
        raise CalendarNotFoundError(division=division)
    return combine_inside_division(grouped_by_division[division].calendars)
