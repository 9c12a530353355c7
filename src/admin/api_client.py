import logging
from typing import Any, Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from src.admin.dtos import (
    CreateEventData,
    CreateGuestData,
    Event,
    Guest,
    GuestFilter,
    GuestStatus,
)
from src.config.settings import settings

logger = logging.getLogger(__name__)

FETCH_GUESTS_FAILED = "Failed to fetch guests"
CREATE_GUEST_FAILED = "Failed to create guest"
DELETE_GUEST_FAILED = "Failed to delete guest"
FETCH_EVENTS_FAILED = "Failed to fetch events"
CREATE_EVENT_FAILED = "Failed to create event"

# list endpoints encode an empty result as null
_guest_list = TypeAdapter(list[Guest] | None)
_event_list = TypeAdapter(list[Event] | None)
_guest = TypeAdapter(Guest)
_event = TypeAdapter(Event)


class ApiError(Exception):
    """Raised when the backend rejects a request or cannot be reached.

    status_code is None for transport failures, where no response arrived.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def response_status(self) -> int:
        """Status to report upstream; 502 when the backend was unreachable."""
        return self.status_code or 502


class UnexpectedResponseError(ApiError):
    """Raised when a 2xx response body does not match the expected record shape."""


class ApiConfig(Protocol):
    api_base_url: str


def extract_error_message(response: httpx.Response, fallback: str) -> str:
    """Return the backend's `error` or `message` field, or the fallback."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if not isinstance(body, dict):
        return fallback
    for key in ("error", "message"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return fallback


class GuestListApiClient:
    """Client for the guest list backend. One HTTP round trip per call, no retries."""

    def __init__(
        self,
        config: ApiConfig = settings,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._base_url = config.api_base_url.rstrip("/")
        self._http_client_class = http_client_class

    async def _request(
        self,
        method: str,
        path: str,
        fallback: str,
        params: dict[str, str] | None = None,
        json: dict | None = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s params=%s", method, url, params or {})
        try:
            async with self._http_client_class() as client:
                response = await client.request(method, url, params=params, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(fallback) from e

        if not response.is_success:
            message = extract_error_message(response, fallback)
            logger.warning(
                "%s %s returned %s: %s", method, url, response.status_code, message
            )
            raise ApiError(message, status_code=response.status_code)
        return response

    @staticmethod
    def _check_status(status: GuestStatus | str | None) -> GuestStatus | None:
        """Reject unknown statuses before any request is made."""
        if not status:
            return None
        try:
            return GuestStatus(status)
        except ValueError:
            raise ApiError(f"Invalid guest status '{status}'", status_code=400) from None

    @staticmethod
    def _parse(response: httpx.Response, adapter: TypeAdapter, fallback: str) -> Any:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Unexpected response body: %s", e)
            raise UnexpectedResponseError(fallback, status_code=response.status_code) from e

    async def list_guests(
        self,
        status: GuestStatus | None = None,
        search: str | None = None,
    ) -> list[Guest]:
        status = self._check_status(status)
        params = GuestFilter(status=status, search=search).to_params()
        response = await self._request(
            "GET", "/guests", FETCH_GUESTS_FAILED, params=params or None
        )
        return self._parse(response, _guest_list, FETCH_GUESTS_FAILED) or []

    async def create_guest(self, data: CreateGuestData) -> Guest:
        self._check_status(data.status)
        response = await self._request(
            "POST", "/guests", CREATE_GUEST_FAILED, json=data.to_json()
        )
        return self._parse(response, _guest, CREATE_GUEST_FAILED)

    async def delete_guest(self, guest_id: int) -> None:
        await self._request("DELETE", f"/guests/{guest_id}", DELETE_GUEST_FAILED)

    async def create_event(self, data: CreateEventData) -> Event:
        response = await self._request(
            "POST", "/events", CREATE_EVENT_FAILED, json=data.to_json()
        )
        return self._parse(response, _event, CREATE_EVENT_FAILED)

    async def list_events(self) -> list[Event]:
        response = await self._request("GET", "/events", FETCH_EVENTS_FAILED)
        return self._parse(response, _event_list, FETCH_EVENTS_FAILED) or []


def get_api_client() -> GuestListApiClient:
    """Dependency provider for the API client. Override in tests."""
    return GuestListApiClient(config=settings, http_client_class=httpx.AsyncClient)
