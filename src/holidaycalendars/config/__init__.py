"""Configuration module for holidaycalendars."""

from holidaycalendars.config.settings import REPOSITORY_CONFIG, RepositoryConfig
from holidaycalendars.config.constants import (
    DATA_PATH_ENV_VAR,
    DOCUMENT_DATE_FORMAT,
    DIVISION_NAMES,
    ICS_PRODID,
    YEAR_PATTERN,
)

__all__ = [
    "REPOSITORY_CONFIG",
    "RepositoryConfig",
    "DATA_PATH_ENV_VAR",
    "DOCUMENT_DATE_FORMAT",
    "DIVISION_NAMES",
    "ICS_PRODID",
    "YEAR_PATTERN",
]
