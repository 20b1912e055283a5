"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import tempfile
from datetime import date
from pathlib import Path

import pytest

# Point the app at a throwaway database before any config is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="calendar-tests-"))
os.environ["CALENDAR_DB_PATH"] = str(_TMP_DIR / "calendar.db")
os.environ["CALENDAR_WEEK_START"] = "sunday"

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import DB_PATH
from core.database import create_schema, get_connection
from models.events import Event


@pytest.fixture
def db():
    """Fresh database with an empty events table."""
    DB_PATH.unlink(missing_ok=True)
    conn = get_connection()
    create_schema(conn)
    yield conn
    conn.close()
    DB_PATH.unlink(missing_ok=True)


@pytest.fixture
def api_client(db):
    """FastAPI test client backed by the fresh database."""
    from fastapi.testclient import TestClient

    from api.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_event():
    """Factory for Event objects with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(**overrides) -> Event:
        fields = {
            "id": next(counter),
            "title": "Sample event",
            "date": date(2024, 3, 5),
            "time": "09:00",
            "duration": 60,
            "description": None,
            "color": "#3B82F6",
        }
        fields.update(overrides)
        return Event(**fields)

    return _make


@pytest.fixture
def sample_payload():
    """Request body for creating an event."""
    return {
        "title": "Standup",
        "date": "2024-03-05",
        "time": "09:00",
        "duration": 15,
        "description": None,
        "color": "#3B82F6",
    }
