"""Utility functions for holidaycalendars."""

from holidaycalendars.utils.divisions import formatted_division_name
from holidaycalendars.utils.paths import document_path, get_bundled_data_dir, list_document_names

__all__ = [
    "formatted_division_name",
    "document_path",
    "get_bundled_data_dir",
    "list_document_names",
]
