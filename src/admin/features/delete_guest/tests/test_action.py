import pytest

from src.admin.api_client import ApiError
from src.admin.dtos import ActionFailure, ActionSuccess
from src.admin.features.delete_guest.action import delete_guest_action, parse_guest_id
from src.admin.tests.inmemory_api_client import InMemoryApiClient, make_guest


@pytest.fixture
def api_client():
    return InMemoryApiClient(guests=[make_guest(7, "Ada Lovelace")])


async def test_missing_id(api_client):
    result = await delete_guest_action({}, api_client)

    assert result == ActionFailure(status_code=400, error="Guest ID missing")
    assert api_client.calls == []


@pytest.mark.parametrize(
    "guest_id",
    ["-5", "0", "abc", "7abc", "1.5", " ", "\u0667", "\uff17", "1" * 5000],
)
async def test_invalid_id(api_client, guest_id):
    result = await delete_guest_action({"id": guest_id}, api_client)

    assert result == ActionFailure(status_code=400, error="Invalid Guest ID")
    assert api_client.calls == []


async def test_valid_id_deletes_guest(api_client):
    result = await delete_guest_action({"id": "7"}, api_client)

    assert result == ActionSuccess()
    assert api_client.calls == [("delete_guest", 7)]
    assert api_client.guests == []


async def test_backend_failure_propagates_status_and_message():
    api_client = InMemoryApiClient(error=ApiError("Guest not found", status_code=404))

    result = await delete_guest_action({"id": "7"}, api_client)

    assert result == ActionFailure(status_code=404, error="Guest not found")


@pytest.mark.parametrize(
    "value, expected",
    [("7", 7), (" 42 ", 42), ("+3", 3), ("-5", None), ("0", None), ("abc", None), ("", None)],
)
def test_parse_guest_id(value, expected):
    assert parse_guest_id(value) == expected
