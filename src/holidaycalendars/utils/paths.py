"""Path utilities for locating calendar documents."""

from pathlib import Path
from typing import List

from holidaycalendars.config.constants import DOCUMENT_EXTENSION


def get_package_dir() -> Path:
    """Get the holidaycalendars package directory.

    Returns:
        Path to the holidaycalendars package.
    """
    return Path(__file__).parent.parent


def get_bundled_data_dir() -> Path:
    """Get the directory holding the documents shipped with the package.

    Returns:
        Path to the bundled data directory.
    """
    return get_package_dir() / "data"


def document_path(data_path: Path, name: str) -> Path:
    """Build the path of the document called ``name`` under ``data_path``."""
    return Path(data_path) / f"{name}{DOCUMENT_EXTENSION}"


def list_document_names(data_path: Path) -> List[str]:
    """List the names of every document under ``data_path``, sorted.

    A missing directory has no documents.
    """
    root = Path(data_path)
    if not root.is_dir():
        return []
    return sorted(path.stem for path in root.glob(f"*{DOCUMENT_EXTENSION}") if path.is_file())
