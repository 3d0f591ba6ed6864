"""Date parsing and display helpers."""

import re
from datetime import date, datetime

# Reduced-precision ISO-8601 forms: ``YYYY`` and ``YYYY-MM``
_REDUCED_DATE = re.compile(r"^(\d{4})(?:-(\d{2}))?$")


def parse_iso_date(value: str) -> date:
    """
    Parse an ISO-8601 calendar date or date-time string.

    A year alone or a year and month resolve to the first day of the
    period.

    Args:
        value: String such as ``1902-06-06``, ``1902-06-06T10:00:00Z``,
            ``1902-06`` or ``1902``.

    Returns:
        The calendar date.

    Raises:
        ValueError: If ``value`` is not a valid ISO-8601 date.
    """
    reduced = _REDUCED_DATE.match(value)
    if reduced:
        year, month = reduced.groups()
        return date(int(year), int(month or 1), 1)
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.fromisoformat(value).date()


def ordinal(day: int) -> str:
    """Return ``day`` with its English ordinal suffix (1st, 2nd, 11th...)."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_long_date(value: date | None) -> str:
    """
    Format a date for display, e.g. ``June 6th, 1902``.

    Returns an empty string for a missing date.
    """
    if value is None:
        return ""
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year}"


def format_iso_date(value: date | None) -> str:
    """Format a date as ``YYYY-MM-DD`` for date inputs, empty if missing."""
    return value.isoformat() if value else ""
