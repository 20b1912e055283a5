"""Pydantic request and response models for API endpoints."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from core.config import DEFAULT_COLOR, DEFAULT_DURATION
from core.validation import normalize_time


class EventPayload(BaseModel):
    """Body of POST /events and PUT /events/{id} (full replace)."""

    title: str = Field(min_length=1)
    date: date
    time: str | None = None
    duration: int = Field(default=DEFAULT_DURATION, gt=0)
    description: str | None = None
    color: str = DEFAULT_COLOR

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title must not be blank")
        return value

    @field_validator("time")
    @classmethod
    def time_is_hh_mm(cls, value: str | None) -> str | None:
        return normalize_time(value)

    @field_validator("duration", mode="before")
    @classmethod
    def missing_duration_is_default(cls, value):
        return DEFAULT_DURATION if value is None else value

    @field_validator("description")
    @classmethod
    def blank_description_is_null(cls, value: str | None) -> str | None:
        return value or None

    def to_fields(self) -> dict:
        """Column values for the events table."""
        return {**self.model_dump(), "date": self.date.isoformat()}


class EventResponse(BaseModel):
    """Stored event."""

    id: int
    title: str
    date: date
    time: str | None = None
    duration: int | None = None
    description: str | None = None
    color: str


class DeleteResponse(BaseModel):
    message: str


class MonthCell(BaseModel):
    date: date
    in_month: bool
    is_today: bool
    events: list[EventResponse]
    more: int


class MonthView(BaseModel):
    """Month grid: complete weeks, cells flagged when outside the month."""

    mode: str
    anchor: date
    title: str
    prev: date
    next: date
    weekdays: list[str]
    cells: list[MonthCell]


class EventBlock(BaseModel):
    event: EventResponse
    top: float
    height: float
    show_time: bool
    show_description: bool = False


class HourRow(BaseModel):
    hour: int
    label: str


class DayColumn(BaseModel):
    date: date
    label: str
    is_today: bool
    blocks: list[EventBlock]
    untimed: list[EventResponse]


class TimeGridView(BaseModel):
    """Week or day hour grid."""

    mode: str
    anchor: date
    title: str
    prev: date
    next: date
    pixels_per_hour: float
    hours: list[HourRow]
    columns: list[DayColumn]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    database_available: bool
    events_stored: int | None = None
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
