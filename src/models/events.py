"""
Data models for calendar events and views.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from core.config import DEFAULT_COLOR, DEFAULT_DURATION
from core.validation import normalize_time, parse_date


class ViewMode(str, Enum):
    """Calendar page granularity."""
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class Direction(str, Enum):
    """Navigation direction."""
    NEXT = "next"
    PREV = "prev"


@dataclass(frozen=True)
class Event:
    """Stored calendar event. Belongs to exactly one calendar day."""
    id: int
    title: str
    date: date
    time: str | None = None
    duration: int | None = DEFAULT_DURATION
    description: str | None = None
    color: str = DEFAULT_COLOR

    @property
    def is_timed(self) -> bool:
        return self.time is not None

    @property
    def effective_duration(self) -> int:
        """Duration in minutes, falling back to the default when unset."""
        return self.duration or DEFAULT_DURATION

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        """Build an Event from a database row or API payload."""
        return cls(
            id=int(data["id"]),
            title=data["title"],
            date=parse_date(data["date"]),
            time=normalize_time(data.get("time")),
            duration=data.get("duration"),
            description=data.get("description"),
            color=data.get("color") or DEFAULT_COLOR,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "time": self.time,
            "duration": self.duration,
            "description": self.description,
            "color": self.color,
        }
