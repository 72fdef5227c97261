"""Loading calendar documents and grouping them by division and year."""

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from holidaycalendars.config import settings
from holidaycalendars.config.constants import YEAR_PATTERN
from holidaycalendars.core.calendar_model import Calendar
from holidaycalendars.core.combiner import combine_inside_division
from holidaycalendars.core.event_model import Event
from holidaycalendars.exceptions.errors import CalendarNotFoundError, InvalidDocumentError
from holidaycalendars.utils.paths import document_path, list_document_names

logger = logging.getLogger(__name__)


@dataclass
class CalendarDocument:
    """A parsed calendar document.

    ``divisions`` still holds the raw per-division objects; they are only
    turned into Calendars by :meth:`Repository.all_grouped_by_division`.
    """

    divisions: Dict[str, Any]
    need_id: Optional[Any] = None


@dataclass
class DivisionCalendars:
    """All calendars known for one division."""

    division: str
    calendars: Dict[str, Calendar] = field(default_factory=dict)
    whole_calendar: Calendar = field(default_factory=Calendar)

    def to_dict(self) -> Dict:
        return {
            "division": self.division,
            "calendars": {year: cal.to_dict() for year, cal in self.calendars.items()},
            "whole_calendar": self.whole_calendar.to_dict(),
        }


def is_year_key(key: Any) -> bool:
    """Check whether a key under a division is a four digit year."""
    return isinstance(key, str) and YEAR_PATTERN.fullmatch(key) is not None


class Repository:
    """Read-only access to one named calendar document.

    The document is parsed and grouped at most once per instance; construct
    a new Repository to see changes on disk.
    """

    def __init__(self, name: str, data_path: Optional[Union[str, Path]] = None):
        self.name = name
        self.data_path = Path(data_path) if data_path is not None else settings.REPOSITORY_CONFIG.data_path
        self.json_path = document_path(self.data_path, name)

        # Names are plain file stems, never paths
        if not name or Path(name).name != name or not self.json_path.is_file():
            raise CalendarNotFoundError(name=name)

        self._cache_lock = threading.RLock()
        self._parsed_document: Optional[CalendarDocument] = None
        self._grouped: Optional[Dict[str, DivisionCalendars]] = None

    @classmethod
    def load(cls, name: str, data_path: Optional[Union[str, Path]] = None) -> "Repository":
        """Open the document called ``name``.

        Raises:
            CalendarNotFoundError: If no such document exists.
        """
        return cls(name, data_path)

    @staticmethod
    def all_slugs(data_path: Optional[Union[str, Path]] = None) -> List[str]:
        """List the names of every available document."""
        root = Path(data_path) if data_path is not None else settings.REPOSITORY_CONFIG.data_path
        return list_document_names(root)

    def parsed_document(self) -> CalendarDocument:
        """Parse the document, once.

        Returns:
            The parsed CalendarDocument.

        Raises:
            InvalidDocumentError: If the content is not a calendar document.
        """
        with self._cache_lock:
            if self._parsed_document is None:
                self._parsed_document = self._read_document()
            return self._parsed_document

    def _read_document(self) -> CalendarDocument:
        try:
            text = self.json_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CalendarNotFoundError(name=self.name) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("Could not parse calendar document %s: %s", self.json_path, e)
            raise InvalidDocumentError(self.json_path, f"malformed JSON: {e}") from e

        if not isinstance(data, dict):
            logger.error("Calendar document %s is not a JSON object", self.json_path)
            raise InvalidDocumentError(self.json_path, "top level is not an object")

        divisions = data.get("divisions")
        if not isinstance(divisions, dict):
            logger.error("Calendar document %s has no divisions object", self.json_path)
            raise InvalidDocumentError(self.json_path, "missing 'divisions' object")

        logger.debug("Parsed %s with %d division(s)", self.json_path, len(divisions))
        return CalendarDocument(divisions=divisions, need_id=data.get("need_id"))

    @property
    def need_id(self) -> Optional[Any]:
        return self.parsed_document().need_id

    def divisions(self) -> List[str]:
        """Division slugs in document order."""
        return list(self.all_grouped_by_division().keys())

    def all_grouped_by_division(self) -> Dict[str, DivisionCalendars]:
        """Group the document into calendars keyed by division and year, once.

        Returns:
            Mapping of division slug to its DivisionCalendars.

        Raises:
            InvalidDocumentError: If an event entry cannot be parsed.
        """
        with self._cache_lock:
            if self._grouped is None:
                self._grouped = self._group_by_division(self.parsed_document())
            return self._grouped

    def _group_by_division(self, document: CalendarDocument) -> Dict[str, DivisionCalendars]:
        grouped: Dict[str, DivisionCalendars] = {}

        for division, by_year in document.divisions.items():
            if not isinstance(by_year, dict):
                logger.warning(
                    "Ignoring division %r in %s: expected an object, got %s",
                    division, self.json_path, type(by_year).__name__
                )
                continue

            skipped = [key for key in by_year if not is_year_key(key)]
            if skipped:
                logger.debug("Skipping non-year keys %s under %s", skipped, division)

            calendars: Dict[str, Calendar] = {}
            for year in sorted(key for key in by_year if is_year_key(key)):
                calendars[year] = Calendar(
                    division=division,
                    year=year,
                    events=self._parse_events(by_year[year], division, year),
                )

            grouped[division] = DivisionCalendars(
                division=division,
                calendars=calendars,
                whole_calendar=combine_inside_division(calendars),
            )

        return grouped

    def _parse_events(self, entries: Any, division: str, year: str) -> List[Event]:
        if not isinstance(entries, list):
            logger.error("Events for %s %s in %s are not a list", division, year, self.json_path)
            raise InvalidDocumentError(self.json_path, f"events for {division} {year} are not a list")

        events = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise InvalidDocumentError(
                    self.json_path, f"event under {division} {year} is not an object"
                )
            try:
                events.append(Event.from_dict(entry, self.json_path))
            except InvalidDocumentError as e:
                logger.error("Invalid event under %s %s in %s: %s", division, year, self.json_path, e)
                raise
        return events

    def find_by_division_and_year(self, division: str, year: str) -> Calendar:
        """Look up the calendar of one division for one year.

        Raises:
            CalendarNotFoundError: If the division or year is absent.
        """
        grouped = self.all_grouped_by_division()
        if division not in grouped:
            raise CalendarNotFoundError(division=division, year=year)

        calendar = grouped[division].calendars.get(year)
        if calendar is None:
            raise CalendarNotFoundError(division=division, year=year)
        return calendar

    def combined_calendar_for_division(self, division: str) -> Calendar:
        """Look up the merged calendar spanning every year of a division.

        Raises:
            CalendarNotFoundError: If the division is absent.
        """
        grouped = self.all_grouped_by_division()
        if division not in grouped:
            raise CalendarNotFoundError(division=division)
        return grouped[division].whole_calendar

    def as_json(self) -> Dict[str, Dict]:
        """Plain-dict form of the grouping, ready for ``json.dumps``."""
        return {
            division: calendars.to_dict()
            for division, calendars in self.all_grouped_by_division().items()
        }
