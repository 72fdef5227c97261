"""
holidaycalendars - Public holiday calendars by division and year

Loads static per-topic JSON documents, groups their events into calendars
per division and year, finds the next upcoming event and exports calendars
as iCalendar feeds.
"""

__version__ = "1.0.0"

# Public API - import commonly used components
from holidaycalendars.config.settings import REPOSITORY_CONFIG, RepositoryConfig
from holidaycalendars.exceptions.errors import (
    CalendarNotFoundError,
    InvalidDocumentError,
    NotFoundError,
)
from holidaycalendars.core.calendar_model import Calendar
from holidaycalendars.core.combiner import combine
from holidaycalendars.core.event_model import Event
from holidaycalendars.core.repository import Repository
from holidaycalendars.utils.divisions import formatted_division_name

__all__ = [
    # Version
    "__version__",
    # Config
    "REPOSITORY_CONFIG",
    "RepositoryConfig",
    # Exceptions
    "CalendarNotFoundError",
    "InvalidDocumentError",
    "NotFoundError",
    # Core
    "Calendar",
    "Event",
    "Repository",
    "combine",
    "formatted_division_name",
]
