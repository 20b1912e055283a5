"""Health check endpoint."""

import sqlite3
from contextlib import closing
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION, DB_PATH
from core.database import count_events, get_connection

router = APIRouter()


def _unhealthy(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content=HealthResponse(
            status="unhealthy",
            version=API_VERSION,
            database_available=False,
            timestamp=datetime.now(timezone.utc).isoformat(),
            error=message,
        ).model_dump(),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Report whether the events table can be read.

    The file is checked before connecting, since sqlite3 would otherwise
    create an empty database in its place.
    """
    if not DB_PATH.exists():
        return _unhealthy("Database not found, run scripts/init_db.py")

    try:
        with closing(get_connection(DB_PATH)) as conn:
            events_stored = count_events(conn)
    except sqlite3.Error as e:
        return _unhealthy(f"Database unreadable: {e}")

    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        database_available=True,
        events_stored=events_stored,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
