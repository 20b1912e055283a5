"""
Render-ready view layouts built from the date-range and placement engines.
"""

from datetime import date
from typing import NamedTuple

from core.config import (
    ALL_DAY_DURATION,
    DAY_DESCRIPTION_MIN_HEIGHT,
    DAY_MIN_EVENT_HEIGHT,
    DAY_PIXELS_PER_HOUR,
    DAY_TIME_LABEL_MIN_HEIGHT,
    EVENT_BLOCK_INSET,
    MONTH_PREVIEW_LIMIT,
    WEEK_DESCRIPTION_MIN_HEIGHT,
    WEEK_MIN_EVENT_HEIGHT,
    WEEK_PIXELS_PER_HOUR,
    WEEK_TIME_LABEL_MIN_HEIGHT,
)
from models.events import Direction, Event, ViewMode
from services import date_range, placement
from services.date_range import DEFAULT_CONFIG, CalendarConfig


def format_duration(minutes: int | None) -> str:
    """Format minutes as '45 min', '1 hour', '2 hours', '1h 30m' or 'All day'."""
    if not minutes:
        return ""
    if minutes == ALL_DAY_DURATION:
        return "All day"
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{hours}h {mins}m"


def pixels_per_hour_for(mode: ViewMode) -> int:
    return DAY_PIXELS_PER_HOUR if ViewMode(mode) == ViewMode.DAY else WEEK_PIXELS_PER_HOUR


def _page_info(anchor: date, mode: ViewMode, config: CalendarConfig) -> dict:
    return {
        "mode": mode.value,
        "anchor": anchor,
        "title": date_range.title(anchor, mode, config),
        "prev": date_range.navigate(anchor, mode, Direction.PREV),
        "next": date_range.navigate(anchor, mode, Direction.NEXT),
    }


def build_month_layout(
    anchor: date,
    events: list[Event],
    today: date,
    config: CalendarConfig = DEFAULT_CONFIG,
    limit: int = MONTH_PREVIEW_LIMIT,
) -> dict:
    """
    Month grid: one cell per visible day, with the first `limit` events and
    a count of the rest. Days of adjacent months are flagged, not removed.
    """
    days = date_range.visible_days(anchor, ViewMode.MONTH, config)
    grouped = placement.group_by_day(events, days)

    cells = []
    for day in days:
        shown, more = placement.summarize_day(grouped[day], limit)
        cells.append(
            {
                "date": day,
                "in_month": not date_range.is_outside_month(day, anchor),
                "is_today": day == today,
                "events": [event.to_dict() for event in shown],
                "more": more,
            }
        )

    return {
        **_page_info(anchor, ViewMode.MONTH, config),
        "weekdays": date_range.weekday_labels(config),
        "cells": cells,
    }


class BlockStyle(NamedTuple):
    min_height: int
    time_label_height: int
    description_height: int | None


WEEK_BLOCK_STYLE = BlockStyle(
    WEEK_MIN_EVENT_HEIGHT, WEEK_TIME_LABEL_MIN_HEIGHT, WEEK_DESCRIPTION_MIN_HEIGHT
)
DAY_BLOCK_STYLE = BlockStyle(
    DAY_MIN_EVENT_HEIGHT, DAY_TIME_LABEL_MIN_HEIGHT, DAY_DESCRIPTION_MIN_HEIGHT
)


def block_style_for(mode: ViewMode) -> BlockStyle:
    return DAY_BLOCK_STYLE if ViewMode(mode) == ViewMode.DAY else WEEK_BLOCK_STYLE


def place_block(
    event: Event, pixels_per_hour: float, style: BlockStyle = WEEK_BLOCK_STYLE
) -> dict | None:
    """
    Render geometry for one event: inset by a couple of pixels and never
    shorter than the style's minimum height. Time and description labels
    are flagged from the raw height, before inset and clamping.
    """
    pos = placement.position(event, pixels_per_hour)
    if pos is None:
        return None
    show_description = (
        style.description_height is not None
        and bool(event.description)
        and pos.height > style.description_height
    )
    return {
        "event": event.to_dict(),
        "top": pos.top + EVENT_BLOCK_INSET,
        "height": max(pos.height - 2 * EVENT_BLOCK_INSET, style.min_height),
        "show_time": pos.height > style.time_label_height,
        "show_description": show_description,
    }


def build_time_grid_layout(
    anchor: date,
    mode: ViewMode,
    events: list[Event],
    today: date,
    config: CalendarConfig = DEFAULT_CONFIG,
    pixels_per_hour: float | None = None,
) -> dict:
    """Week or day hour grid with one column per visible day."""
    mode = ViewMode(mode)
    if mode == ViewMode.MONTH:
        raise ValueError("Time grid layout is only available for week and day views")
    if pixels_per_hour is None:
        pixels_per_hour = pixels_per_hour_for(mode)

    style = block_style_for(mode)
    days = date_range.visible_days(anchor, mode, config)
    grouped = placement.group_by_day(events, days)

    columns = []
    for day in days:
        blocks = []
        untimed = []
        for event in grouped[day]:
            block = place_block(event, pixels_per_hour, style)
            if block is None:
                untimed.append(event.to_dict())
            else:
                blocks.append(block)
        columns.append(
            {
                "date": day,
                "label": f"{day.strftime('%a')} {day.day}",
                "is_today": day == today,
                "blocks": blocks,
                "untimed": untimed,
            }
        )

    return {
        **_page_info(anchor, mode, config),
        "pixels_per_hour": pixels_per_hour,
        "hours": [
            {"hour": hour, "label": placement.hour_label(hour)}
            for hour in placement.hours_of_day()
        ],
        "columns": columns,
    }


def build_agenda(events: list[Event]) -> list[Event]:
    """All events by date, then time; untimed events close each day."""
    return sorted(events, key=lambda e: (e.date, e.time is None, e.time or ""))
