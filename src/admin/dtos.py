from dataclasses import asdict, dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class GuestStatus(str, Enum):
    PENDING = "pending"
    ATTENDING = "attending"
    DECLINED = "declined"


class AdminView(str, Enum):
    GUESTS = "guests"
    EVENTS = "events"


class Guest(BaseModel):
    """Guest record as returned by the backend. Ids and timestamps are server assigned."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    email: str
    phone: str
    status: GuestStatus
    created_at: str


class Event(BaseModel):
    """Event record as returned by the backend."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | None = None
    title: str
    description: str | None = None
    event_date: str | None = None
    location: str | None = None
    created_at: str | None = None
    # listing only: one-line summary and RSVP count
    display: str = ""
    rsvps: int = 0

    @field_validator("description", "location", mode="before")
    @classmethod
    def unwrap_null_string(cls, v):
        # the listing sends nullable columns as {"String": ..., "Valid": ...}
        if isinstance(v, dict) and "Valid" in v:
            return v.get("String") if v["Valid"] else None
        return v


@dataclass(frozen=True)
class GuestFilter:
    status: GuestStatus | None = None
    search: str | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.status:
            params["status"] = GuestStatus(self.status).value
        if self.search:
            params["search"] = self.search
        return params


@dataclass(frozen=True)
class CreateGuestData:
    """Payload for creating a guest. The backend defaults status to pending when omitted."""

    name: str
    email: str
    phone: str
    status: GuestStatus | None = None

    def to_json(self) -> dict:
        body = {"name": self.name, "email": self.email, "phone": self.phone}
        if self.status:
            body["status"] = GuestStatus(self.status).value
        return body


@dataclass(frozen=True)
class CreateEventData:
    """Payload for creating an event. event_date is an ISO-8601 string."""

    title: str
    event_date: str
    description: str | None = None
    location: str | None = None

    def to_json(self) -> dict:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class ActionSuccess:
    success: bool = True


@dataclass(frozen=True)
class ActionFailure:
    """Form action failure, rendered as an inline message with an HTTP status."""

    status_code: int
    error: str


ActionResult = ActionSuccess | ActionFailure
