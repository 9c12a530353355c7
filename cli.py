"""CLI commands for guest list administration."""

import asyncio
from typing import NoReturn, Optional

import typer

from src.admin.api_client import ApiError, get_api_client
from src.admin.dtos import ActionFailure, CreateGuestData, GuestStatus
from src.admin.features.create_event.action import create_event_action
from src.admin.features.delete_guest.action import delete_guest_action
from src.config.logging import setup_logging

app = typer.Typer(help="CLI commands for guest list administration")


@app.callback()
def main():
    setup_logging()


def _fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def list_guests(
    status: Optional[GuestStatus] = typer.Option(None, help="Filter by RSVP status"),
    search: Optional[str] = typer.Option(None, help="Search by name or email"),
):
    """List guests, optionally filtered by status and search text."""
    try:
        guests = asyncio.run(get_api_client().list_guests(status=status, search=search))
    except ApiError as e:
        _fail(e.message)

    if not guests:
        typer.secho("No guests found.", fg=typer.colors.YELLOW)
        return
    for guest in guests:
        typer.echo(f"{guest.id:>5}  {guest.status.value:<10} {guest.name} <{guest.email}> {guest.phone}")


@app.command()
def create_guest(
    name: str,
    email: str,
    phone: str = typer.Argument(""),
    status: Optional[GuestStatus] = typer.Option(None, help="Defaults to pending on the backend"),
):
    """Create a guest."""
    data = CreateGuestData(name=name, email=email, phone=phone, status=status)
    try:
        guest = asyncio.run(get_api_client().create_guest(data))
    except ApiError as e:
        _fail(e.message)

    typer.secho("Guest created successfully!", fg=typer.colors.GREEN)
    typer.secho(f"ID: {guest.id}", fg=typer.colors.CYAN)
    typer.secho(f"Status: {guest.status.value}", fg=typer.colors.CYAN)


@app.command()
def delete_guest(guest_id: str = typer.Argument(..., metavar="ID")):
    """Delete a guest by id."""
    result = asyncio.run(delete_guest_action({"id": guest_id}, get_api_client()))
    if isinstance(result, ActionFailure):
        _fail(result.error)
    typer.secho(f"Guest {guest_id} deleted.", fg=typer.colors.GREEN)


@app.command()
def list_events():
    """List events with their RSVP counts."""
    try:
        events = asyncio.run(get_api_client().list_events())
    except ApiError as e:
        _fail(e.message)

    if not events:
        typer.secho("No events found.", fg=typer.colors.YELLOW)
        return
    for event in events:
        summary = event.display or event.title
        typer.echo(f"{event.id or '-':>5}  {summary}  ({event.rsvps} RSVPs)")


@app.command()
def create_event(
    title: str,
    event_date: str = typer.Argument(..., help="ISO-8601 date or date-time"),
    description: str = typer.Option("", help="Optional description"),
    location: str = typer.Option("", help="Optional location"),
):
    """Create an event, validated the same way as the admin form."""
    form = {
        "title": title,
        "event_date": event_date,
        "description": description,
        "location": location,
    }
    result = asyncio.run(create_event_action(form, get_api_client()))
    if isinstance(result, ActionFailure):
        _fail(result.error)
    typer.secho(f"Event '{title.strip()}' created successfully!", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
