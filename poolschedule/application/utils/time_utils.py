from __future__ import annotations

from datetime import date, datetime, time

TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%Y-%m-%d"


def parse_time(value: str) -> time:
    """Parse a wall-clock "HH:MM" string. Raises ValueError on malformed input."""
    if not isinstance(value, str):
        raise ValueError(f"time must be a string, got {type(value).__name__}")
    return datetime.strptime(value.strip(), TIME_FORMAT).time()


def parse_date(value: str) -> date:
    """Parse a "YYYY-MM-DD" string. Raises ValueError on malformed input."""
    if not isinstance(value, str):
        raise ValueError(f"date must be a string, got {type(value).__name__}")
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def combine(date_str: str, time_str: str) -> datetime:
    return datetime.combine(parse_date(date_str), parse_time(time_str))


def format_time(value: datetime | time) -> str:
    return value.strftime(TIME_FORMAT)


def normalize_time(value: str) -> str:
    """Canonicalize "9:00" / " 09:00 " to "09:00"."""
    return format_time(parse_time(value))


def normalize_date(value: str) -> str:
    return parse_date(value).strftime(DATE_FORMAT)
