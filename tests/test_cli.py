import pytest
from typer.testing import CliRunner

import cli
from src.admin.api_client import ApiError
from src.admin.dtos import GuestStatus
from src.admin.tests.inmemory_api_client import InMemoryApiClient, make_guest

runner = CliRunner()


@pytest.fixture
def api_client(monkeypatch):
    client = InMemoryApiClient(guests=[make_guest(7, "Ada Lovelace", GuestStatus.ATTENDING)])
    monkeypatch.setattr(cli, "get_api_client", lambda: client)
    return client


def test_list_guests(api_client):
    result = runner.invoke(cli.app, ["list-guests", "--status", "attending"])

    assert result.exit_code == 0
    assert "Ada Lovelace" in result.output
    assert api_client.calls == [("list_guests", GuestStatus.ATTENDING, None)]


def test_create_guest(api_client):
    result = runner.invoke(cli.app, ["create-guest", "Grace Hopper", "grace@example.com", "555-0199"])

    assert result.exit_code == 0
    assert "Guest created successfully!" in result.output
    assert api_client.guests[-1].status == GuestStatus.PENDING


def test_delete_guest_invalid_id(api_client):
    result = runner.invoke(cli.app, ["delete-guest", "abc"])

    assert result.exit_code == 1
    assert api_client.calls == []


def test_create_event_invalid_date(api_client):
    result = runner.invoke(cli.app, ["create-event", "Launch", "not-a-date"])

    assert result.exit_code == 1
    assert api_client.calls == []


def test_list_events_backend_error(monkeypatch):
    client = InMemoryApiClient(error=ApiError("Failed to fetch events", status_code=500))
    monkeypatch.setattr(cli, "get_api_client", lambda: client)

    result = runner.invoke(cli.app, ["list-events"])

    assert result.exit_code == 1
