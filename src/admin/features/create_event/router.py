from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.admin.api_client import GuestListApiClient, get_api_client
from src.admin.features.create_event.action import create_event_action
from src.admin.responses import action_response
from src.admin.urls import CREATE_EVENT_URL

router = APIRouter()


@router.post(CREATE_EVENT_URL)
async def create_event(
    request: Request,
    api_client: GuestListApiClient = Depends(get_api_client),
) -> JSONResponse:
    """
    Handle the create-event form.
    Expects form fields title, event_date and optional description/location.
    """
    form = await request.form()
    result = await create_event_action(form, api_client)
    return action_response(result)
