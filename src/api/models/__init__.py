"""API Pydantic models."""

from .responses import (
    DeleteResponse,
    ErrorCodes,
    ErrorResponse,
    EventPayload,
    EventResponse,
    HealthResponse,
    MonthView,
    TimeGridView,
)

__all__ = [
    "DeleteResponse",
    "ErrorCodes",
    "ErrorResponse",
    "EventPayload",
    "EventResponse",
    "HealthResponse",
    "MonthView",
    "TimeGridView",
]
