"""Calendar data model: an ordered run of events for one division."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Mapping, Optional, Tuple

from holidaycalendars.core.event_model import Event


@dataclass(frozen=True)
class Calendar:
    """Events for a division, either for one year or merged across years.

    ``year`` is None for a merged calendar. Events keep the order of the
    source document and are never re-sorted. The calendar is read-only;
    any sequence of events passed in is stored as a tuple.
    """

    division: Optional[str] = None
    year: Optional[str] = None
    events: Tuple[Event, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "events", tuple(self.events))

    @property
    def is_combined(self) -> bool:
        return self.year is None

    @classmethod
    def combine(cls, calendars_by_year: Mapping[str, "Calendar"]) -> "Calendar":
        """Merge per-year calendars into a single calendar with no year."""
        from holidaycalendars.core.combiner import combine_inside_division

        return combine_inside_division(calendars_by_year)

    def upcoming_event(self, today: Optional[date] = None) -> Optional[Event]:
        from holidaycalendars.core.upcoming import upcoming_event

        return upcoming_event(self, today)

    def is_event_today(self, today: Optional[date] = None) -> bool:
        from holidaycalendars.core.upcoming import is_event_today

        return is_event_today(self, today)

    def should_show_bunting(self, today: Optional[date] = None) -> bool:
        from holidaycalendars.core.upcoming import should_show_bunting

        return should_show_bunting(self, today)

    def formatted_division(self, slug: Optional[str] = None) -> Optional[str]:
        """Display name for ``slug``, defaulting to this calendar's division."""
        from holidaycalendars.utils.divisions import formatted_division_name

        return formatted_division_name(slug if slug is not None else self.division)

    def to_ics(self) -> str:
        from holidaycalendars.core.ics_builder import build_ics

        return build_ics(self)

    def to_dict(self) -> Dict:
        """Convert to a plain dictionary, omitting the year when merged."""
        result: Dict = {"division": self.division}
        if self.year is not None:
            result["year"] = self.year
        result["events"] = [event.to_dict() for event in self.events]
        return result
