"""Canonical date-string conversion and the noon anchor.

Dates cross every boundary as ``YYYY-MM-DD``. Arithmetic that needs a
time of day pins it to 12:00 so that truncating back to a date is stable.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time

from rangectl.domain.errors import InvalidDateString

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

NOON = time(12)


def parse_date(value: str) -> date:
    """Convert ``YYYY-MM-DD`` text into a :class:`date`.

    Raises:
        InvalidDateString: The text does not match the pattern or names a
            day that does not exist (e.g. ``2014-02-30``).
    """
    match = DATE_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidDateString(str(value))
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateString(value) from exc


def format_date(value: date) -> str:
    """Inverse of :func:`parse_date`, zero-padded."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def at_noon(value: date) -> datetime:
    """Anchor *value* at 12:00:00.000."""
    return datetime.combine(value, NOON)


def sunday_index(value: date) -> int:
    """Weekday with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7
