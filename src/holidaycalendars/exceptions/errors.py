"""Exception types raised by holidaycalendars."""

from pathlib import Path
from typing import Iterable, Optional, Union


class CalendarError(Exception):
    """Base class for all holidaycalendars errors."""


class CalendarNotFoundError(CalendarError):
    """Raised when a document, division or year does not exist."""

    def __init__(
        self,
        name: Optional[Union[str, Path]] = None,
        division: Optional[str] = None,
        year: Optional[str] = None,
    ):
        self.name = name
        self.division = division
        self.year = year

        parts = []
        if name is not None:
            parts.append(f"document '{name}'")
        if division is not None:
            parts.append(f"division '{division}'")
        if year is not None:
            parts.append(f"year '{year}'")
        target = ", ".join(parts) if parts else "calendar"
        super().__init__(f"Calendar not found: {target}")


# Short alias used by callers that only care about absence
NotFoundError = CalendarNotFoundError


class InvalidDocumentError(CalendarError):
    """Raised when a calendar document cannot be parsed into calendars."""

    def __init__(self, path: Optional[Union[str, Path]], reason: str):
        self.path = path
        self.reason = reason
        where = f" ({path})" if path is not None else ""
        super().__init__(f"Invalid calendar document{where}: {reason}")


class EventValidationError(InvalidDocumentError):
    """Raised when an event entry lacks required fields."""

    def __init__(
        self,
        missing_fields: Iterable[str],
        event_title: Optional[str] = None,
        path: Optional[Union[str, Path]] = None,
    ):
        self.missing_fields = set(missing_fields)
        self.event_title = event_title
        fields = ", ".join(sorted(self.missing_fields))
        super().__init__(
            path,
            f"event '{event_title or 'Unknown'}' is missing required fields: {fields}",
        )
