"""
Event field parsing and validation.
"""

import re
from datetime import date, datetime

TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")


def parse_date(value) -> date:
    """
    Parse a calendar date.

    Accepts date objects, 'YYYY-MM-DD' strings and ISO timestamps
    ('2024-03-05T00:00:00.000Z'), keeping only the date part.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or len(value) < 10:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")


def parse_time(value: str) -> tuple[int, int]:
    """Split an 'HH:MM' (or 'HH:MM:SS') time into (hour, minute)."""
    match = TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid time '{value}', expected HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid time '{value}', expected HH:MM")
    return hour, minute


def normalize_time(value: str | None) -> str | None:
    """Normalize a time to zero-padded 'HH:MM'; blank values become None."""
    if value is None or not str(value).strip():
        return None
    hour, minute = parse_time(value)
    return f"{hour:02d}:{minute:02d}"


def validate_event_fields(fields: dict) -> list[str]:
    """
    Check event fields and return a list of error messages.

    Checks:
    1. Title is present and not blank
    2. Date is present and parseable
    3. Time, when given, is HH:MM
    4. Duration, when given, is a positive number of minutes
    """
    errors = []

    title = fields.get("title")
    if not title or not str(title).strip():
        errors.append("Missing title")

    if not fields.get("date"):
        errors.append("Missing date")
    else:
        try:
            parse_date(fields["date"])
        except ValueError as e:
            errors.append(str(e))

    if fields.get("time"):
        try:
            parse_time(fields["time"])
        except ValueError as e:
            errors.append(str(e))

    duration = fields.get("duration")
    if duration is not None:
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            errors.append(f"Invalid duration '{duration}', expected positive minutes")

    return errors
