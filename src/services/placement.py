"""
Event placement: day grouping for month view and pixel geometry for
week/day hour grids.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from core.config import MONTH_PREVIEW_LIMIT
from core.validation import parse_time
from models.events import Event


@dataclass(frozen=True)
class Placement:
    """Vertical geometry of a timed event inside a day column."""

    top: float
    height: float


def group_by_day(events: Iterable[Event], days: Iterable[date]) -> dict[date, list[Event]]:
    """
    Bucket events by calendar day.

    Every requested day gets a key, even when empty. Events keep their input
    order within a day; events on days not requested are dropped.
    """
    grouped: dict[date, list[Event]] = {day: [] for day in days}
    for event in events:
        bucket = grouped.get(event.date)
        if bucket is not None:
            bucket.append(event)
    return grouped


def summarize_day(events: list[Event], limit: int = MONTH_PREVIEW_LIMIT) -> tuple[list[Event], int]:
    """Split a day's events into the first `limit` shown and the hidden count."""
    return events[:limit], max(len(events) - limit, 0)


def position(event: Event, pixels_per_hour: float) -> Placement | None:
    """
    Map an event's start time and duration onto the hour grid.

    Returns None for untimed events, which only appear in month view.
    """
    if not event.time:
        return None
    hour, minute = parse_time(event.time)
    return Placement(
        top=(hour * 60 + minute) * pixels_per_hour / 60,
        height=event.effective_duration * pixels_per_hour / 60,
    )


def events_for_hour_slot(events: Iterable[Event], day: date, hour: int) -> list[Event]:
    """Events on `day` starting within `hour`. Untimed events never match."""
    return [
        event
        for event in events
        if event.date == day and event.time and parse_time(event.time)[0] == hour
    ]


def hours_of_day() -> list[int]:
    return list(range(24))


def hour_label(hour: int) -> str:
    """Format an hour as '12AM', '9AM', '12PM', '5PM'."""
    suffix = "AM" if hour < 12 else "PM"
    return f"{hour % 12 or 12}{suffix}"
