"""Event CRUD endpoints."""

import sqlite3
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import get_db
from api.models.responses import DeleteResponse, ErrorCodes, EventPayload, EventResponse
from core import database

router = APIRouter()


def parse_query_date(name: str, date_str: str | None) -> date | None:
    """Parse an optional YYYY-MM-DD query parameter."""
    if not date_str:
        return None
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": f"Invalid {name} format",
                "code": ErrorCodes.INVALID_REQUEST,
                "details": ["Expected format: YYYY-MM-DD"],
            },
        )


def event_not_found(event_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "error": "Event not found",
            "code": ErrorCodes.NOT_FOUND,
            "details": [f"No event with id {event_id}"],
        },
    )


@router.get("/events", response_model=list[EventResponse])
async def list_events_endpoint(
    request: Request,
    startDate: str | None = None,
    endDate: str | None = None,
    conn: sqlite3.Connection = Depends(get_db),
):
    """
    List events ordered by date, then time.

    The range filter is applied only when both startDate and endDate are given.
    """
    start = parse_query_date("startDate", startDate)
    end = parse_query_date("endDate", endDate)

    rows = database.list_events(conn, start, end)
    request.state.request_log.events_returned = len(rows)
    return rows


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    request: Request,
    payload: EventPayload,
    conn: sqlite3.Connection = Depends(get_db),
):
    row = database.create_event(conn, payload.to_fields())
    request.state.request_log.event_id = row["id"]
    return row


@router.put("/events/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    request: Request,
    event_id: int,
    payload: EventPayload,
    conn: sqlite3.Connection = Depends(get_db),
):
    """Replace every field of an event."""
    request.state.request_log.event_id = event_id
    row = database.update_event(conn, event_id, payload.to_fields())
    if row is None:
        raise event_not_found(event_id)
    return row


@router.delete("/events/{event_id}", response_model=DeleteResponse)
async def delete_event_endpoint(
    request: Request,
    event_id: int,
    conn: sqlite3.Connection = Depends(get_db),
):
    request.state.request_log.event_id = event_id
    if not database.delete_event(conn, event_id):
        raise event_not_found(event_id)
    return DeleteResponse(message="Event deleted successfully")
