"""UTC timestamp helpers shared by the DTOs and the JSON store.

Stored and emitted form is ``2024-05-01T09:30:00.000Z``, the format
the browser client produces with ``Date.toISOString()``.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pos.domain.exceptions import ValidationError


def format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(text: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    try:
        moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Invalid timestamp: {text!r}") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment
