"""Custom exceptions for holidaycalendars."""

from holidaycalendars.exceptions.errors import (
    CalendarError,
    CalendarNotFoundError,
    NotFoundError,
    InvalidDocumentError,
    EventValidationError,
)

__all__ = [
    "CalendarError",
    "CalendarNotFoundError",
    "NotFoundError",
    "InvalidDocumentError",
    "EventValidationError",
]
