from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.admin.api_client import GuestListApiClient, get_api_client
from src.admin.features.delete_guest.action import delete_guest_action
from src.admin.responses import action_response
from src.admin.urls import DELETE_GUEST_URL

router = APIRouter()


@router.post(DELETE_GUEST_URL)
async def delete_guest(
    request: Request,
    api_client: GuestListApiClient = Depends(get_api_client),
) -> JSONResponse:
    form = await request.form()
    return action_response(await delete_guest_action(form, api_client))
