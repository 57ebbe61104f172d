from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_datetime, parse_iso_datetime
from ..core.enums import EventStatus, EventType

WIRE_FIELDS = {
    "id": "event_id",
    "name": "name",
    "date": "date",
    "location": "location",
    "type": "event_type",
    "status": "status",
    "cancellationReason": "cancellation_reason",
    "isPublic": "is_public",
}


@dataclass(frozen=True)
class Event:
    """A scheduled gathering.

    ``status`` is operator-set; whether the event is in the past is a
    separate display concern (see views.event_board).
    """

    event_id: str
    name: str
    date: datetime
    event_type: EventType
    status: EventStatus
    location: Optional[str] = None
    cancellation_reason: Optional[str] = None
    is_public: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "name": self.name,
            "date": format_datetime(self.date),
            "location": self.location or "",
            "type": self.event_type.value,
            "status": self.status.value,
            "cancellationReason": self.cancellation_reason or "",
            "isPublic": self.is_public,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Event":
        return cls(
            event_id=str(data["id"]),
            name=data["name"],
            date=parse_iso_datetime(data["date"]),
            event_type=EventType(data["type"]),
            status=EventStatus(data["status"]),
            location=data.get("location") or None,
            cancellation_reason=data.get("cancellationReason") or None,
            is_public=bool(data.get("isPublic", False)),
        )


def most_recent_event(events: Sequence[Event]) -> Optional[Event]:
    """Latest event by date regardless of status, or None when there are none."""
    return max(events, key=lambda e: e.date) if events else None
