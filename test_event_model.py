"""Tests for the Event and Calendar models, combining, and exceptions."""

import dataclasses
import unittest
from datetime import date

import pytest

from holidaycalendars.core.calendar_model import Calendar
from holidaycalendars.core.combiner import combine, combine_inside_division
from holidaycalendars.core.event_model import Event
from holidaycalendars.core.repository import DivisionCalendars
from holidaycalendars.exceptions import (
    CalendarNotFoundError,
    EventValidationError,
    InvalidDocumentError,
)


class TestEventModel(unittest.TestCase):
    """Test the Event data model."""

    def test_from_dict_valid_data(self):
        """Verify Event can be created from a document entry."""
        event = Event.from_dict({
            "title": "Christmas Day",
            "date": "25/12/2024",
            "notes": "Substitute day",
            "bunting": "true",
        })

        self.assertEqual(event.title, "Christmas Day")
        self.assertEqual(event.date, date(2024, 12, 25))
        self.assertEqual(event.notes, "Substitute day")
        self.assertEqual(event.bunting, "true")

    def test_from_dict_defaults(self):
        """Verify absent notes and bunting get their defaults."""
        event = Event.from_dict({"title": "Boxing Day", "date": "26/12/2024"})

        self.assertEqual(event.notes, "")
        self.assertEqual(event.bunting, "false")

    def test_from_dict_keeps_non_string_bunting(self):
        """Verify a JSON boolean true is not coerced to the string flag."""
        self.assertIs(Event.from_dict({"title": "A", "date": "01/01/2024", "bunting": True}).bunting, True)
        self.assertEqual(Event.from_dict({"title": "A", "date": "01/01/2024", "bunting": False}).bunting, "false")

    def test_from_dict_missing_fields(self):
        """Verify Event raises EventValidationError for missing fields."""
        with self.assertRaises(EventValidationError) as context:
            Event.from_dict({"notes": ""})

        self.assertEqual(context.exception.missing_fields, {"title", "date"})
        self.assertIsInstance(context.exception, InvalidDocumentError)

    def test_from_dict_bad_date(self):
        """Verify dates outside DD/MM/YYYY are rejected."""
        for value in ("2024-12-25", "31/02/2024", None):
            with self.assertRaises(InvalidDocumentError):
                Event.from_dict({"title": "Bad", "date": value})

    def test_to_dict_roundtrip(self):
        """Verify to_dict produces data that can recreate the event."""
        original = Event("Spring bank holiday", date(2024, 5, 27), "", "true")

        self.assertEqual(Event.from_dict(original.to_dict()), original)
        self.assertEqual(original.to_dict()["date"], "27/05/2024")

    def test_event_is_immutable(self):
        """Verify events cannot be modified after construction."""
        event = Event("Good Friday", date(2024, 3, 29))

        with self.assertRaises(dataclasses.FrozenInstanceError):
            event.title = "Easter Monday"


def _year_calendars():
    return {
        "2024": Calendar("scotland", "2024", [Event("A", date(2024, 1, 1)), Event("B", date(2024, 12, 25))]),
        "2025": Calendar("scotland", "2025", [Event("C", date(2025, 1, 1))]),
    }


def test_combine_inside_division_concatenates_in_mapping_order() -> None:
    combined = combine_inside_division(_year_calendars())

    assert combined.division == "scotland"
    assert combined.year is None
    assert [event.title for event in combined.events] == ["A", "B", "C"]


def test_combine_inside_division_does_not_resort() -> None:
    calendars = _year_calendars()
    reversed_calendars = {"2025": calendars["2025"], "2024": calendars["2024"]}

    combined = Calendar.combine(reversed_calendars)

    assert [event.title for event in combined.events] == ["C", "A", "B"]


def test_combine_inside_division_leaves_inputs_untouched() -> None:
    calendars = _year_calendars()
    combine_inside_division(calendars)

    assert len(calendars["2024"].events) == 2
    assert len(calendars["2025"].events) == 1


def test_combine_inside_division_empty() -> None:
    combined = combine_inside_division({})

    assert combined.division is None
    assert combined.year is None
    assert combined.events == ()


def test_combine_against_grouping() -> None:
    calendars = _year_calendars()
    grouped = {"scotland": DivisionCalendars("scotland", calendars, combine_inside_division(calendars))}

    assert combine(grouped, "scotland") == grouped["scotland"].whole_calendar

    with pytest.raises(CalendarNotFoundError) as excinfo:
        combine(grouped, "england-and-wales")
    assert excinfo.value.division == "england-and-wales"


def test_calendar_to_dict_omits_year_when_combined() -> None:
    combined = combine_inside_division(_year_calendars())

    assert combined.to_dict() == {
        "division": "scotland",
        "events": [event.to_dict() for event in combined.events],
    }
    assert _year_calendars()["2025"].to_dict()["year"] == "2025"


class TestCustomExceptions(unittest.TestCase):
    """Test custom exception classes."""

    def test_not_found_error(self):
        """Verify CalendarNotFoundError stores what was missing."""
        error = CalendarNotFoundError(division="scotland", year="1999")
        self.assertIsNone(error.name)
        self.assertEqual(error.division, "scotland")
        self.assertEqual(error.year, "1999")
        self.assertIn("scotland", str(error))
        self.assertIn("1999", str(error))

    def test_invalid_document_error(self):
        """Verify InvalidDocumentError stores path and reason."""
        error = InvalidDocumentError("lib/data/x.json", "malformed JSON")
        self.assertEqual(error.path, "lib/data/x.json")
        self.assertEqual(error.reason, "malformed JSON")
        self.assertIn("lib/data/x.json", str(error))

    def test_event_validation_error(self):
        """Verify EventValidationError stores field info."""
        error = EventValidationError({"date"}, "Christmas Day")
        self.assertEqual(error.missing_fields, {"date"})
        self.assertEqual(error.event_title, "Christmas Day")
        self.assertIn("date", str(error))
        self.assertIn("Christmas Day", str(error))
