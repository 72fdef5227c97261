"""Human-readable names for divisions."""

from typing import Optional

from holidaycalendars.config.constants import DIVISION_NAMES


def formatted_division_name(slug: Optional[str]) -> Optional[str]:
    """Look up the display name for a division slug.

    Args:
        slug: Division identifier such as ``"england-and-wales"``.

    Returns:
        The display name, or None when the slug is not recognized.
    """
    if slug is None:
        return None
    return DIVISION_NAMES.get(slug)
