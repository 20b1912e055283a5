"""FastAPI dependencies for shared resources."""

import sqlite3
from typing import Iterator

from core.database import get_connection


def get_db() -> Iterator[sqlite3.Connection]:
    """Open a database connection for the duration of one request."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()
