"""
Async HTTP client for the events CRUD API.
"""

import logging
from datetime import date

import httpx

from core.config import CALENDAR_API_TIMEOUT, CALENDAR_API_URL
from models.events import Event

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for failed store operations."""


class EventNotFoundError(StoreError):
    """The event targeted by an update or delete does not exist."""

    def __init__(self, event_id: int):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class StoreRequestError(StoreError):
    """Network failure or non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Pull the 'error' text out of an API error body, if there is one."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        detail = payload.get("detail", payload)
        if isinstance(detail, dict) and isinstance(detail.get("error"), str):
            return detail["error"]
        if isinstance(payload.get("error"), str):
            return payload["error"]

    return response.text.strip()[:200] or "Request failed without an error payload"


class EventStoreClient:
    """
    Client for the /events endpoints.

    Every method raises StoreError subclasses on failure and never returns
    partial results.
    """

    def __init__(
        self,
        base_url: str = CALENDAR_API_URL,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            base_url=base_url, timeout=CALENDAR_API_TIMEOUT
        )

    async def aclose(self):
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "EventStoreClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict | None = None,
        json_body: dict | None = None,
        event_id: int | None = None,
    ):
        try:
            response = await self._http_client.request(method, path, params=params, json=json_body)
        except httpx.HTTPError as e:
            raise StoreRequestError(f"{method} {path} failed: {e}") from e

        if response.status_code == 404 and event_id is not None:
            raise EventNotFoundError(event_id)
        if response.status_code < 200 or response.status_code >= 300:
            raise StoreRequestError(
                f"{method} {path} returned {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise StoreRequestError(f"{method} {path} returned invalid JSON") from e

    async def list(self, start_date: date | None = None, end_date: date | None = None) -> list[Event]:
        """Fetch events, optionally limited to an inclusive date range."""
        params = {}
        if start_date:
            params["startDate"] = start_date.isoformat()
        if end_date:
            params["endDate"] = end_date.isoformat()

        payload = await self._request("GET", "/events", params=params or None)
        if not isinstance(payload, list):
            raise StoreRequestError("GET /events returned an unexpected payload shape")

        try:
            events = [Event.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreRequestError(f"GET /events returned a malformed event: {e}") from e
        logger.debug("Fetched %d events", len(events))
        return events

    async def create(self, fields: dict) -> Event:
        payload = await self._request("POST", "/events", json_body=fields)
        return self._decode(payload, "POST /events")

    async def update(self, event_id: int, fields: dict) -> Event:
        """Replace every field of an existing event."""
        path = f"/events/{event_id}"
        payload = await self._request("PUT", path, json_body=fields, event_id=event_id)
        return self._decode(payload, f"PUT {path}")

    async def delete(self, event_id: int) -> dict:
        return await self._request("DELETE", f"/events/{event_id}", event_id=event_id)

    @staticmethod
    def _decode(payload, context: str) -> Event:
        try:
            return Event.from_dict(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise StoreRequestError(f"{context} returned a malformed event: {e}") from e
