"""
Date-range computation for month, week and day views.

All functions are pure: the week start is passed in through CalendarConfig
instead of being taken from a locale default.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from core.config import WEEK_START
from models.events import Direction, ViewMode


@dataclass(frozen=True)
class CalendarConfig:
    """Calendar conventions. week_start uses Python weekday numbers (Monday=0)."""

    week_start: int = WEEK_START

    def __post_init__(self):
        if not 0 <= self.week_start <= 6:
            raise ValueError(f"week_start must be between 0 and 6, got {self.week_start}")


DEFAULT_CONFIG = CalendarConfig()


def format_date_short(d: date) -> str:
    """Format date as 'Mon D' (platform-safe, e.g., 'Mar 5')."""
    return f"{d.strftime('%b')} {d.day}"


def start_of_week(day: date, config: CalendarConfig = DEFAULT_CONFIG) -> date:
    """First day of the week containing `day`."""
    offset = (day.weekday() - config.week_start) % 7
    return day - timedelta(days=offset)


def add_months(anchor: date, months: int, preferred_day: int | None = None) -> date:
    """
    Shift by whole calendar months, clamping to the end of the target month.

    Jan 31 + 1 month is Feb 28 (or 29), never Mar 2/3. When preferred_day is
    given it replaces anchor.day before clamping.
    """
    index = anchor.year * 12 + (anchor.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(preferred_day or anchor.day, last_day))


def visible_days(
    anchor: date, mode: ViewMode, config: CalendarConfig = DEFAULT_CONFIG
) -> list[date]:
    """
    Ordered days displayed for the page containing `anchor`.

    Month: complete weeks covering the whole month (a multiple of 7 days,
    including days from adjacent months). Week: the 7 days of the week
    containing anchor. Day: just anchor.
    """
    mode = ViewMode(mode)
    if mode == ViewMode.MONTH:
        cal = calendar.Calendar(firstweekday=config.week_start)
        return [day for week in cal.monthdatescalendar(anchor.year, anchor.month) for day in week]
    if mode == ViewMode.WEEK:
        first = start_of_week(anchor, config)
        return [first + timedelta(days=i) for i in range(7)]
    return [anchor]


def visible_range(
    anchor: date, mode: ViewMode, config: CalendarConfig = DEFAULT_CONFIG
) -> tuple[date, date]:
    """First and last visible day, inclusive."""
    days = visible_days(anchor, mode, config)
    return days[0], days[-1]


def navigate(
    anchor: date,
    mode: ViewMode,
    direction: Direction,
    preferred_day: int | None = None,
) -> date:
    """Move the anchor one month, week or day forward or backward."""
    mode = ViewMode(mode)
    step = 1 if Direction(direction) == Direction.NEXT else -1
    if mode == ViewMode.MONTH:
        return add_months(anchor, step, preferred_day)
    if mode == ViewMode.WEEK:
        return anchor + timedelta(weeks=step)
    return anchor + timedelta(days=step)


def title(anchor: date, mode: ViewMode, config: CalendarConfig = DEFAULT_CONFIG) -> str:
    """
    Page heading.

    Month: 'March 2024'. Week: 'Feb 25 – Mar 2, 2024' (year of the last
    day). Day: 'Tuesday, March 5, 2024'.
    """
    mode = ViewMode(mode)
    if mode == ViewMode.MONTH:
        return anchor.strftime("%B %Y")
    if mode == ViewMode.WEEK:
        first, last = visible_range(anchor, mode, config)
        return f"{format_date_short(first)} – {format_date_short(last)}, {last.year}"
    return f"{anchor.strftime('%A')}, {anchor.strftime('%B')} {anchor.day}, {anchor.year}"


def is_outside_month(day: date, anchor: date) -> bool:
    """True for month-grid days that belong to the previous or next month."""
    return (day.year, day.month) != (anchor.year, anchor.month)


def weekday_labels(config: CalendarConfig = DEFAULT_CONFIG) -> list[str]:
    """Short weekday headers starting at the configured week start."""
    return [calendar.day_abbr[(config.week_start + i) % 7] for i in range(7)]
