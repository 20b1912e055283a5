"""Per-request audit rows written to the api_requests table."""

import sqlite3
import uuid
from contextlib import closing
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

from core.database import get_connection, insert_request_log


@dataclass
class RequestLog:
    """
    What the middleware learns about one request.

    Routes fill in `event_id` and `events_returned` through
    `request.state.request_log`; error handlers fill in the error fields.
    """

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    event_id: int | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0
    events_returned: int | None = None

    def record_error(self, code: str, message: str):
        self.error_code = code
        self.error_message = message


def log_request(log: RequestLog, conn: sqlite3.Connection | None = None) -> None:
    """Store the log row, on `conn` if given, otherwise on a short-lived connection."""
    if conn is not None:
        insert_request_log(conn, asdict(log))
        return
    with closing(get_connection()) as own_conn:
        insert_request_log(own_conn, asdict(log))
