"""Calendar view endpoint: month and hour-grid layouts."""

import sqlite3
from datetime import date

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_db
from api.models.responses import MonthView, TimeGridView
from api.routes.events import parse_query_date
from core import database
from models.events import Event, ViewMode
from services import date_range, layout

router = APIRouter(prefix="/calendar")


def _load_events(conn: sqlite3.Connection, anchor: date, mode: ViewMode) -> list[Event]:
    start, end = date_range.visible_range(anchor, mode)
    return [Event.from_dict(row) for row in database.list_events(conn, start, end)]


@router.get("/month", response_model=MonthView)
async def month_view(
    request: Request,
    anchor: str | None = None,
    conn: sqlite3.Connection = Depends(get_db),
):
    """Month grid for the month containing anchor (default: today)."""
    today = date.today()
    anchor_date = parse_query_date("anchor", anchor) or today
    events = _load_events(conn, anchor_date, ViewMode.MONTH)
    request.state.request_log.events_returned = len(events)
    return layout.build_month_layout(anchor_date, events, today)


@router.get("/{mode}", response_model=TimeGridView)
async def time_grid_view(
    request: Request,
    mode: ViewMode,
    anchor: str | None = None,
    conn: sqlite3.Connection = Depends(get_db),
):
    """
    Week or day hour grid; timed events carry pixel offsets.

    /calendar/month is matched by the route above.
    """
    today = date.today()
    anchor_date = parse_query_date("anchor", anchor) or today
    events = _load_events(conn, anchor_date, mode)
    request.state.request_log.events_returned = len(events)
    return layout.build_time_grid_layout(anchor_date, mode, events, today)
