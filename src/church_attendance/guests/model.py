from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_datetime, parse_iso_datetime

WIRE_FIELDS = {
    "id": "guest_id",
    "eventId": "event_id",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "homeChurch": "home_church",
    "registrationDate": "registration_date",
}


@dataclass(frozen=True)
class Guest:
    """A non-member attendee registered against one event."""

    guest_id: str
    event_id: str
    first_name: str
    last_name: str
    email: Optional[str]
    phone: Optional[str]
    home_church: str
    registration_date: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        return {
            "id": self.guest_id,
            "eventId": self.event_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email or "",
            "phone": self.phone or "",
            "homeChurch": self.home_church,
            "registrationDate": format_datetime(self.registration_date),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Guest":
        return cls(
            guest_id=str(data["id"]),
            event_id=data["eventId"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            email=data.get("email") or None,
            phone=data.get("phone") or None,
            home_church=data.get("homeChurch", ""),
            registration_date=parse_iso_datetime(data["registrationDate"]),
        )
