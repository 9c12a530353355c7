import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.admin.api_client import ApiError, GuestListApiClient, get_api_client
from src.admin.dtos import AdminView, Event, Guest, GuestStatus
from src.admin.urls import ADMIN_PAGE_URL

logger = logging.getLogger(__name__)

router = APIRouter()


class AdminPageResponse(BaseModel):
    view: AdminView
    guests: list[Guest] | None = None
    events: list[Event] | None = None
    status: GuestStatus | None = None
    search: str | None = None


@router.get(ADMIN_PAGE_URL, response_model=AdminPageResponse, response_model_exclude_none=True)
async def load_admin_page(
    view: str | None = Query(None, description="guests (default) or events"),
    status: GuestStatus | None = Query(None, description="Filter guests by RSVP status"),
    search: str | None = Query(None, description="Search guests by name or email"),
    api_client: GuestListApiClient = Depends(get_api_client),
) -> AdminPageResponse:
    """
    Load the data for the admin page: the event list when view=events,
    otherwise the guest list narrowed by the optional filters.
    """
    try:
        if view == AdminView.EVENTS.value:
            events = await api_client.list_events()
            return AdminPageResponse(view=AdminView.EVENTS, events=events)

        guests = await api_client.list_guests(status=status, search=search)
    except ApiError as e:
        logger.error("Failed to load admin page (view=%s): %s", view, e.message)
        raise HTTPException(status_code=e.response_status, detail=e.message)

    return AdminPageResponse(view=AdminView.GUESTS, guests=guests, status=status, search=search)
