"""Entry point for running holidaycalendars as a module.

Usage: python -m holidaycalendars NAME DIVISION [--year YYYY] [--ics]
"""

import argparse
import logging
import sys
from typing import List, Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holidaycalendars",
        description="Show the next holiday for a division, or export it as ICS.",
    )
    parser.add_argument("name", help="calendar document name, e.g. bank-holidays")
    parser.add_argument("division", help="division slug, e.g. england-and-wales")
    parser.add_argument("--year", help="four digit year (default: all years)")
    parser.add_argument("--ics", action="store_true", help="print the calendar as iCalendar text")
    parser.add_argument("--data-path", help="directory holding the calendar documents")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    from holidaycalendars.core.repository import Repository
    from holidaycalendars.exceptions.errors import CalendarError

    try:
        repository = Repository.load(args.name, args.data_path)
        if args.year:
            calendar = repository.find_by_division_and_year(args.division, args.year)
        else:
            calendar = repository.combined_calendar_for_division(args.division)
    except CalendarError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.ics:
        sys.stdout.write(calendar.to_ics())
        return 0

    name = calendar.formatted_division() or calendar.division
    event = calendar.upcoming_event()
    if event is None:
        print(f"No upcoming events for {name}.")
        return 0

    line = f"{name}: {event.title} on {event.date.strftime('%A %d %B %Y')}"
    if calendar.should_show_bunting():
        line += " (bunting)"
    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
