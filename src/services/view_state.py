"""
Calendar view state and its pure transitions.

Each transition takes a ViewState and returns a new one; nothing here
touches the network, so every UI interaction can be replayed in tests.
"""

from dataclasses import dataclass, field, replace
from datetime import date

from core.config import DEFAULT_COLOR, DEFAULT_DURATION
from core.validation import normalize_time
from models.events import Direction, Event, ViewMode
from services import date_range


@dataclass(frozen=True)
class EventForm:
    """Draft fields for creating or editing an event."""

    title: str = ""
    time: str = ""
    duration: int = DEFAULT_DURATION
    description: str = ""
    color: str = DEFAULT_COLOR


@dataclass(frozen=True)
class ViewState:
    anchor: date
    mode: ViewMode = ViewMode.MONTH
    events: tuple[Event, ...] = ()
    selected_date: date | None = None
    selected_hour: int | None = None
    form: EventForm = field(default_factory=EventForm)
    form_open: bool = False
    editing_event_id: int | None = None
    # Day-of-month to restore when month navigation passes through shorter months
    preferred_day: int | None = None
    error: str | None = None


def initial_state(anchor: date, mode: ViewMode = ViewMode.MONTH) -> ViewState:
    return ViewState(anchor=anchor, mode=ViewMode(mode), preferred_day=anchor.day)


def select_view(state: ViewState, mode: ViewMode) -> ViewState:
    return replace(state, mode=ViewMode(mode))


def navigate(state: ViewState, direction: Direction) -> ViewState:
    """
    Move one page forward or backward.

    Month steps keep the preferred day-of-month, so Jan 31 -> Feb 29 ->
    Mar 31 and a forward/backward round trip lands on the original date.
    """
    if state.mode == ViewMode.MONTH:
        preferred_day = state.preferred_day or state.anchor.day
        anchor = date_range.navigate(state.anchor, state.mode, direction, preferred_day)
        return replace(state, anchor=anchor, preferred_day=preferred_day)

    anchor = date_range.navigate(state.anchor, state.mode, direction)
    return replace(state, anchor=anchor, preferred_day=anchor.day)


def go_to_today(state: ViewState, today: date) -> ViewState:
    return replace(state, anchor=today, preferred_day=today.day)


def open_form_for_date(state: ViewState, day: date) -> ViewState:
    return replace(state, selected_date=day, selected_hour=None, form_open=True)


def open_form_for_hour(state: ViewState, day: date, hour: int) -> ViewState:
    """Open the form for an hour-grid slot, pre-filling the slot's start time."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be between 0 and 23, got {hour}")
    return replace(
        state,
        selected_date=day,
        selected_hour=hour,
        form=replace(state.form, time=f"{hour:02d}:00"),
        form_open=True,
    )


def open_form_for_edit(state: ViewState, event: Event) -> ViewState:
    """Load a stored event into the form; submitting will update it."""
    return replace(
        state,
        selected_date=event.date,
        selected_hour=None,
        editing_event_id=event.id,
        form=EventForm(
            title=event.title,
            time=event.time or "",
            duration=event.duration or DEFAULT_DURATION,
            description=event.description or "",
            color=event.color,
        ),
        form_open=True,
    )


def update_form(state: ViewState, **fields) -> ViewState:
    """Change draft fields, e.g. update_form(state, title='Standup')."""
    return replace(state, form=replace(state.form, **fields))


def discard(state: ViewState) -> ViewState:
    """Close the form and drop the draft without persisting anything."""
    return replace(
        state,
        form=EventForm(),
        form_open=False,
        editing_event_id=None,
        selected_hour=None,
    )


def with_events(state: ViewState, events) -> ViewState:
    """Replace (never merge) the displayed events after a successful fetch."""
    return replace(state, events=tuple(events), error=None)


def with_error(state: ViewState, message: str) -> ViewState:
    return replace(state, error=message)


def can_submit(state: ViewState) -> bool:
    """An open form with a title and a selected date is required before anything is sent."""
    return (
        state.form_open
        and bool(state.form.title.strip())
        and state.selected_date is not None
    )


def form_payload(state: ViewState) -> dict:
    """Request body for create/update: blank optional fields become null."""
    if state.selected_date is None:
        raise ValueError("No date selected")
    form = state.form
    return {
        "title": form.title.strip(),
        "date": state.selected_date.isoformat(),
        "time": normalize_time(form.time),
        "duration": form.duration,
        "description": form.description or None,
        "color": form.color,
    }
