from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..common.ids import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.enums import EventStatus
from ..core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from ..events.repository import EventRepository
from .model import Guest
from .repository import GuestRepository

logger = logging.getLogger(__name__)


class GuestService:
    def __init__(self, guests: GuestRepository, events: EventRepository):
        self._guests = guests
        self._events = events

    def list_guests(self) -> Sequence[Guest]:
        return self._guests.list_all()

    def get_guest(self, guest_id: str) -> Guest:
        guest = self._guests.get_by_id(guest_id)
        if not guest:
            raise NotFoundError("Guest not found")
        return guest

    def create_guest(
        self,
        *,
        event_id: str,
        first_name: str,
        last_name: str,
        home_church: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        guest_id: Optional[str] = None,
        registration_date: Optional[str | datetime] = None,
    ) -> Guest:
        if not event_id or not self._events.get_by_id(event_id):
            raise InvalidReferenceError("Event does not exist")

        guest_id = optional_text(guest_id) or new_id("g")
        if self._guests.get_by_id(guest_id):
            raise ValidationError("Guest ID already exists")

        guest = Guest(
            guest_id=guest_id,
            event_id=event_id,
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
            email=optional_text(email),
            phone=optional_text(phone),
            home_church=require_non_empty(home_church, "Home church"),
            registration_date=parse_iso_datetime(registration_date) if registration_date else now_local(),
        )
        return self._guests.create(guest)

    def register_for_event(
        self,
        event_id: str,
        *,
        first_name: str,
        last_name: str,
        home_church: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Guest:
        """Public self-registration. Cancelled events take no registrations."""
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        if event.status == EventStatus.CANCELLED:
            raise ValidationError("This event has been cancelled")

        guest = self.create_guest(
            event_id=event_id,
            first_name=first_name,
            last_name=last_name,
            home_church=home_church,
            email=email,
            phone=phone,
        )
        logger.info("Guest %s registered for event %s", guest.guest_id, event_id)
        return guest

    def update_guest(self, guest_id: str, changes: Mapping[str, Any]) -> Guest:
        current = self.get_guest(guest_id)

        clean: dict[str, Any] = {}
        for field, value in changes.items():
            if field == "event_id":
                if not value or not self._events.get_by_id(value):
                    raise InvalidReferenceError("Event does not exist")
                clean[field] = value
            elif field == "first_name":
                clean[field] = require_non_empty(value, "First name")
            elif field == "last_name":
                clean[field] = require_non_empty(value, "Last name")
            elif field == "home_church":
                clean[field] = require_non_empty(value, "Home church")
            elif field in ("email", "phone"):
                clean[field] = optional_text(value)

        if not clean:
            return current
        updated = self._guests.update(guest_id, clean)
        if not updated:
            raise NotFoundError("Guest not found")
        return updated

    def delete_guest(self, guest_id: str) -> None:
        if not self._guests.delete(guest_id):
            logger.debug("Delete of unknown guest %s ignored", guest_id)
