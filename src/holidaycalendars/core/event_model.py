"""Event data model for calendar entries."""

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import ClassVar, Dict, FrozenSet, Optional

from holidaycalendars.config.constants import DEFAULT_BUNTING, DOCUMENT_DATE_FORMAT
from holidaycalendars.exceptions.errors import EventValidationError, InvalidDocumentError


@dataclass(frozen=True)
class Event:
    """A single all-day holiday or event."""

    title: str
    date: date
    notes: str = ""
    bunting: str = DEFAULT_BUNTING

    # Required fields for validation
    REQUIRED_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"title", "date"})

    @classmethod
    def from_dict(cls, data: Dict, path: Optional[Path] = None) -> "Event":
        """Create an Event from a document entry.

        Args:
            data: Dictionary with ``title``, ``date`` (DD/MM/YYYY) and
                optional ``notes`` and ``bunting``.
            path: Document the entry came from, named in error messages.

        Returns:
            The parsed Event.

        Raises:
            EventValidationError: If required fields are missing.
            InvalidDocumentError: If the date is not in DD/MM/YYYY form.
        """
        missing = cls.REQUIRED_FIELDS - set(data.keys())
        if missing:
            raise EventValidationError(
                missing_fields=missing,
                event_title=data.get("title", "Unknown"),
                path=path,
            )

        try:
            event_date = datetime.strptime(data["date"], DOCUMENT_DATE_FORMAT).date()
        except (TypeError, ValueError) as e:
            raise InvalidDocumentError(
                path, f"event '{data['title']}' has an invalid date {data['date']!r}"
            ) from e

        bunting = data.get("bunting")
        if bunting is None or bunting is False:
            bunting = DEFAULT_BUNTING

        return cls(
            title=data["title"],
            date=event_date,
            notes=data.get("notes") or "",
            bunting=bunting,
        )

    def to_dict(self) -> Dict:
        """Convert back to the document representation.

        Returns:
            Dictionary in the same shape as a document entry.
        """
        return {
            "title": self.title,
            "date": self.date.strftime(DOCUMENT_DATE_FORMAT),
            "notes": self.notes,
            "bunting": self.bunting,
        }
