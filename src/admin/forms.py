from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any


def get_field(form: Mapping[str, Any], name: str) -> str:
    """Read a text field from submitted form data. Missing or non-text values read as empty."""
    value = form.get(name)
    return value if isinstance(value, str) else ""


def optional_text(value: str) -> str | None:
    """Trim a text field, dropping it when nothing is left."""
    return value.strip() or None


def parse_event_date(value: str) -> datetime | None:
    """
    Parse an ISO-8601 date or date-time.

    Naive values are taken as UTC. Returns None when the value is not a valid
    calendar date-time.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        # shifting to UTC can leave the supported year range
        return None


def to_iso_utc(value: datetime) -> str:
    """Format as UTC ISO-8601 with millisecond precision, e.g. 2025-01-01T00:00:00.000Z."""
    utc = value.astimezone(timezone.utc).replace(tzinfo=None)
    return utc.isoformat(timespec="milliseconds") + "Z"
