"""
SQLite database operations for calendar events.
"""

import sqlite3
from datetime import date
from pathlib import Path

from core.config import DB_PATH

EVENT_COLUMNS = ("title", "date", "time", "duration", "description", "color")


def get_connection(db_path: Path | None = None) -> sqlite3.Connection:
    """
    Get a database connection with rows addressable by column name.

    FastAPI may open and use a request's connection on different worker
    threads, so the same-thread check is disabled.
    """
    conn = sqlite3.connect(db_path or DB_PATH, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def create_schema(conn: sqlite3.Connection):
    """Create the events and API logging tables if they don't exist."""
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS events (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            date TEXT NOT NULL,
            time TEXT,
            duration INTEGER DEFAULT 60,
            description TEXT,
            color TEXT DEFAULT '#3B82F6'
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS api_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id TEXT UNIQUE NOT NULL,
            timestamp TEXT NOT NULL,
            endpoint TEXT NOT NULL,
            method TEXT NOT NULL,
            client_ip TEXT,
            event_id INTEGER,
            status_code INTEGER NOT NULL,
            error_code TEXT,
            error_message TEXT,
            processing_time_ms INTEGER NOT NULL,
            events_returned INTEGER
        )
    """)

    cursor.execute("CREATE INDEX IF NOT EXISTS idx_events_date_time ON events(date, time)")
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_requests_timestamp ON api_requests(timestamp)"
    )

    conn.commit()


def _row_to_dict(row: sqlite3.Row) -> dict:
    return {key: row[key] for key in row.keys()}


def list_events(
    conn: sqlite3.Connection,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[dict]:
    """
    List events ordered by date, then time.

    The date filter only applies when both bounds are given. Untimed events
    sort after timed ones on the same day.
    """
    query = "SELECT * FROM events"
    params: list = []

    if start_date and end_date:
        query += " WHERE date >= ? AND date <= ?"
        params.extend([start_date.isoformat(), end_date.isoformat()])

    query += " ORDER BY date, time IS NULL, time, id"

    cursor = conn.cursor()
    cursor.execute(query, params)
    return [_row_to_dict(row) for row in cursor.fetchall()]


def get_event(conn: sqlite3.Connection, event_id: int) -> dict | None:
    cursor = conn.cursor()
    cursor.execute("SELECT * FROM events WHERE id = ?", (event_id,))
    row = cursor.fetchone()
    return _row_to_dict(row) if row else None


def create_event(conn: sqlite3.Connection, fields: dict) -> dict:
    """Insert an event and return the stored row, including its new id."""
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO events (title, date, time, duration, description, color)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        tuple(fields.get(column) for column in EVENT_COLUMNS),
    )
    conn.commit()
    return get_event(conn, cursor.lastrowid)


def insert_event_rows(conn: sqlite3.Connection, events: list[dict]):
    """Insert many events in one transaction."""
    cursor = conn.cursor()
    cursor.executemany(
        """
        INSERT INTO events (title, date, time, duration, description, color)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        [tuple(event.get(column) for column in EVENT_COLUMNS) for event in events],
    )
    conn.commit()


def update_event(conn: sqlite3.Connection, event_id: int, fields: dict) -> dict | None:
    """
    Replace all fields of an event.

    Returns the updated row, or None if no event has this id.
    """
    cursor = conn.cursor()
    cursor.execute(
        """
        UPDATE events
        SET title = ?, date = ?, time = ?, duration = ?, description = ?, color = ?
        WHERE id = ?
        """,
        (*(fields.get(column) for column in EVENT_COLUMNS), event_id),
    )
    conn.commit()
    if cursor.rowcount == 0:
        return None
    return get_event(conn, event_id)


def delete_event(conn: sqlite3.Connection, event_id: int) -> bool:
    """Delete an event. Returns False if no event has this id."""
    cursor = conn.cursor()
    cursor.execute("DELETE FROM events WHERE id = ?", (event_id,))
    conn.commit()
    return cursor.rowcount > 0


def count_events(conn: sqlite3.Connection) -> int:
    cursor = conn.cursor()
    cursor.execute("SELECT COUNT(*) FROM events")
    return cursor.fetchone()[0]


REQUEST_LOG_COLUMNS = (
    "request_id",
    "timestamp",
    "endpoint",
    "method",
    "client_ip",
    "event_id",
    "status_code",
    "error_code",
    "error_message",
    "processing_time_ms",
    "events_returned",
)


def insert_request_log(conn: sqlite3.Connection, record: dict):
    """Append one row to api_requests. Keys outside REQUEST_LOG_COLUMNS are ignored."""
    placeholders = ", ".join("?" for _ in REQUEST_LOG_COLUMNS)
    conn.execute(
        f"INSERT INTO api_requests ({', '.join(REQUEST_LOG_COLUMNS)}) VALUES ({placeholders})",
        tuple(record.get(column) for column in REQUEST_LOG_COLUMNS),
    )
    conn.commit()
