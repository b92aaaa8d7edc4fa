"""Date and time utility functions."""
from datetime import date, datetime
from typing import Union


DayLike = Union[date, datetime, str]


def parse_day(value: DayLike) -> date:
    """
    Normalize a participation day to a date.

    Args:
        value: date, datetime or string in YYYY-MM-DD format

    Returns:
        date object

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
        TypeError: If value is of another type
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    raise TypeError(f"Unsupported day value: {value!r}")


def day_key(value: DayLike) -> str:
    """Return the YYYY-MM-DD string used to store and compare days."""
    return parse_day(value).isoformat()


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp.

    A trailing "Z" is accepted as UTC.
    """
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


def format_day(value: DayLike) -> str:
    """Format a day as dd/mm/YYYY (e.g. 16/01/2025)."""
    return parse_day(value).strftime("%d/%m/%Y")


def format_day_label(value: DayLike) -> str:
    """Format a day as the short chart label dd/mm."""
    return parse_day(value).strftime("%d/%m")


def format_timestamp(value: str) -> str:
    """Format an ISO timestamp as dd/mm/YYYY HH:MM in its own offset."""
    return parse_timestamp(value).strftime("%d/%m/%Y %H:%M")


def is_within_range(day: date, start: date, end: date) -> bool:
    """Inclusive range check."""
    return start <= day <= end


def now_iso() -> str:
    """Current local time as ISO 8601 with offset."""
    return datetime.now().astimezone().isoformat()
