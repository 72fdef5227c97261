"""Centralized constants for holidaycalendars.

Document format, iCalendar output and division naming constants live here so
the repository, exporter and command line agree on them.
"""

import re

# Configuration environment variable for the document root
DATA_PATH_ENV_VAR = "HOLIDAYCALENDARS_DATA_PATH"

# Source documents
DOCUMENT_EXTENSION = ".json"
DOCUMENT_DATE_FORMAT = "%d/%m/%Y"

# Only keys matching this pattern are treated as years under a division
YEAR_PATTERN = re.compile(r"\A[0-9]{4}\Z")

# Events without a bunting entry are not decorated
DEFAULT_BUNTING = "false"
BUNTING_ENABLED = "true"

# ICS calendar constants
ICS_PRODID = "-//uk.gov/GOVUK calendars//EN"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_DATE_FORMAT = "%Y%m%d"

# Display names for the known divisions
DIVISION_NAMES = {
    "england-and-wales": "England and Wales",
    "scotland": "Scotland",
    "northern-ireland": "Northern Ireland",
}
