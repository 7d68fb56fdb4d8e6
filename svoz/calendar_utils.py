"""
Calendar Utilities

Local-day normalization and Czech display formatting for collection dates.
"""

from datetime import date, datetime, timedelta
from typing import Union

# Day name to weekday number mapping (Monday=0, Sunday=6)
DAY_TO_WEEKDAY = {
    'monday': 0,
    'tuesday': 1,
    'wednesday': 2,
    'thursday': 3,
    'friday': 4,
    'saturday': 5,
    'sunday': 6,
}

# Czech weekday abbreviations indexed by date.weekday()
CZECH_WEEKDAYS = ['Po', 'Út', 'St', 'Čt', 'Pá', 'So', 'Ne']


def parse_weekday(day_name: str) -> int:
    """Convert a day name like 'friday' to its weekday number."""
    key = day_name.strip().lower()
    if key not in DAY_TO_WEEKDAY:
        raise ValueError(f"Unknown weekday: {day_name!r}")
    return DAY_TO_WEEKDAY[key]


def to_local_midnight(timestamp: Union[datetime, date]) -> date:
    """
    Strip the time of day from a timestamp.

    Aware datetimes are converted to the host's local time first, so the
    result is always the local calendar day the timestamp falls on.

    Args:
        timestamp: A datetime (naive local or aware) or a date

    Returns:
        The local calendar date
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone()
        return timestamp.date()
    return timestamp


def format_display_date(d: date) -> str:
    """Render a date as 'DD.MM.YYYY (Www)', e.g. '15.10.2025 (St)'."""
    return f"{d.day:02d}.{d.month:02d}.{d.year} ({CZECH_WEEKDAYS[d.weekday()]})"


def next_weekday_on_or_after(from_date: date, target_weekday: int) -> date:
    """
    Get the next occurrence of a weekday on or after a given date.
    If from_date is already the target weekday, from_date is returned.
    """
    days_ahead = (target_weekday - from_date.weekday()) % 7
    return from_date + timedelta(days=days_ahead)


def last_weekday_on_or_before(from_date: date, target_weekday: int) -> date:
    """Get the latest occurrence of a weekday on or before a given date."""
    days_back = (from_date.weekday() - target_weekday) % 7
    return from_date - timedelta(days=days_back)
