"""
View controller: owns the calendar ViewState and talks to the event store.
"""

import logging
from datetime import date

from core.validation import validate_event_fields
from models.events import Direction, Event, ViewMode
from services import date_range, layout
from services import view_state as vs
from services.date_range import DEFAULT_CONFIG, CalendarConfig
from services.store_client import EventStoreClient, StoreError

logger = logging.getLogger(__name__)


class ViewController:
    """
    Drives the calendar page.

    Store failures are logged and recorded in state.error; the displayed
    events are only ever replaced by a successful fetch. Calls are not
    serialized, so overlapping refreshes resolve as last-response-wins.
    """

    def __init__(
        self,
        client: EventStoreClient,
        config: CalendarConfig = DEFAULT_CONFIG,
        today: date | None = None,
        mode: ViewMode = ViewMode.MONTH,
        anchor: date | None = None,
    ):
        self.client = client
        self.config = config
        self.today = today or date.today()
        self.state = vs.initial_state(anchor or self.today, mode)

    @property
    def events(self) -> list[Event]:
        return list(self.state.events)

    # -------------------------------------------------------------------------
    # Store operations
    # -------------------------------------------------------------------------

    async def refresh(self) -> bool:
        """Refetch the events of the visible range. Returns False on failure."""
        start, end = date_range.visible_range(self.state.anchor, self.state.mode, self.config)
        try:
            events = await self.client.list(start, end)
        except StoreError as e:
            logger.error("Error fetching events: %s", e)
            self.state = vs.with_error(self.state, str(e))
            return False
        self.state = vs.with_events(self.state, events)
        return True

    async def submit(self) -> bool:
        """
        Create or update the event in the form, then refetch.

        Does nothing (and sends nothing) while the form is closed or the title
        or date is missing.
        """
        if not vs.can_submit(self.state):
            logger.debug("Submit ignored: open form with title and date required")
            return False

        try:
            payload = vs.form_payload(self.state)
        except ValueError as e:
            logger.warning("Submit rejected: %s", e)
            self.state = vs.with_error(self.state, str(e))
            return False

        errors = validate_event_fields(payload)
        if errors:
            logger.warning("Submit rejected: %s", "; ".join(errors))
            self.state = vs.with_error(self.state, "; ".join(errors))
            return False

        editing_id = self.state.editing_event_id
        try:
            if editing_id is not None:
                await self.client.update(editing_id, payload)
            else:
                await self.client.create(payload)
        except StoreError as e:
            logger.error("Error saving event: %s", e)
            self.state = vs.with_error(self.state, str(e))
            return False

        self.state = vs.discard(self.state)
        await self.refresh()
        return True

    async def remove(self, event_id: int) -> bool:
        try:
            await self.client.delete(event_id)
        except StoreError as e:
            logger.error("Error deleting event %s: %s", event_id, e)
            self.state = vs.with_error(self.state, str(e))
            return False

        if self.state.editing_event_id == event_id:
            self.state = vs.discard(self.state)
        await self.refresh()
        return True

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    async def select_view(self, mode: ViewMode):
        self.state = vs.select_view(self.state, mode)
        await self.refresh()

    async def navigate(self, direction: Direction):
        self.state = vs.navigate(self.state, direction)
        await self.refresh()

    async def go_to_today(self):
        self.state = vs.go_to_today(self.state, self.today)
        await self.refresh()

    # -------------------------------------------------------------------------
    # Form
    # -------------------------------------------------------------------------

    def open_form_for_date(self, day: date):
        self.state = vs.open_form_for_date(self.state, day)

    def open_form_for_hour(self, day: date, hour: int):
        self.state = vs.open_form_for_hour(self.state, day, hour)

    def open_form_for_edit(self, event: Event):
        self.state = vs.open_form_for_edit(self.state, event)

    def update_form(self, **fields):
        self.state = vs.update_form(self.state, **fields)

    def discard(self):
        self.state = vs.discard(self.state)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def visible_days(self) -> list[date]:
        return date_range.visible_days(self.state.anchor, self.state.mode, self.config)

    def title(self) -> str:
        return date_range.title(self.state.anchor, self.state.mode, self.config)

    def layout(self) -> dict:
        """Month or time-grid layout for the current mode."""
        if self.state.mode == ViewMode.MONTH:
            return layout.build_month_layout(
                self.state.anchor, self.events, self.today, self.config
            )
        return layout.build_time_grid_layout(
            self.state.anchor, self.state.mode, self.events, self.today, self.config
        )
