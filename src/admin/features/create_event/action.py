import logging
from collections.abc import Mapping
from typing import Any

from src.admin.api_client import ApiError, GuestListApiClient, UnexpectedResponseError
from src.admin.dtos import ActionFailure, ActionResult, ActionSuccess, CreateEventData
from src.admin.forms import get_field, optional_text, parse_event_date, to_iso_utc

logger = logging.getLogger(__name__)


async def create_event_action(
    form: Mapping[str, Any], api_client: GuestListApiClient
) -> ActionResult:
    """
    Validate a submitted create-event form and forward it to the backend.

    Validation failures return a 400 result without touching the network.
    Backend failures are returned with the backend's status and message.
    """
    title = get_field(form, "title")
    event_date = get_field(form, "event_date")

    if not title.strip():
        return ActionFailure(status_code=400, error="Title is required")
    if not event_date:
        return ActionFailure(status_code=400, error="Date is required")

    parsed_date = parse_event_date(event_date)
    if parsed_date is None:
        return ActionFailure(status_code=400, error="Invalid date")

    payload = CreateEventData(
        title=title.strip(),
        description=optional_text(get_field(form, "description")),
        event_date=to_iso_utc(parsed_date),
        location=optional_text(get_field(form, "location")),
    )

    try:
        event = await api_client.create_event(payload)
    except UnexpectedResponseError:
        # accepted by the backend; the record itself is not echoed back
        logger.info("Created event (%s), response body not a record", payload.title)
        return ActionSuccess()
    except ApiError as e:
        return ActionFailure(status_code=e.response_status, error=e.message)

    logger.info("Created event %s (%s)", event.id, event.title)
    return ActionSuccess()
