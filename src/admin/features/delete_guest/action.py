import logging
import re
from collections.abc import Mapping
from typing import Any

from src.admin.api_client import ApiError, GuestListApiClient
from src.admin.dtos import ActionFailure, ActionResult, ActionSuccess
from src.admin.forms import get_field

logger = logging.getLogger(__name__)

GUEST_ID_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_guest_id(value: str) -> int | None:
    """Return the guest id as a positive int, or None when it is not one."""
    text = value.strip()
    if not GUEST_ID_PATTERN.fullmatch(text):
        return None
    try:
        guest_id = int(text)
    except ValueError:
        # longer than the int conversion limit
        return None
    return guest_id if guest_id > 0 else None


async def delete_guest_action(
    form: Mapping[str, Any], api_client: GuestListApiClient
) -> ActionResult:
    id_str = get_field(form, "id")
    if not id_str:
        return ActionFailure(status_code=400, error="Guest ID missing")

    guest_id = parse_guest_id(id_str)
    if guest_id is None:
        return ActionFailure(status_code=400, error="Invalid Guest ID")

    try:
        await api_client.delete_guest(guest_id)
    except ApiError as e:
        return ActionFailure(status_code=e.response_status, error=e.message)

    logger.info("Deleted guest %s", guest_id)
    return ActionSuccess()
