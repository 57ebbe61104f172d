from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_datetime
from ..common.ids import new_id
from ..common.validators import optional_text, require_choice, require_non_empty
from ..core.enums import EventStatus, EventType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Event
from .repository import EventRepository

logger = logging.getLogger(__name__)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


class EventService:
    def __init__(self, events: EventRepository):
        self._events = events

    def list_events(self) -> Sequence[Event]:
        return self._events.list_all()

    def get_event(self, event_id: str) -> Event:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    def exists(self, event_id: str) -> bool:
        return self._events.get_by_id(event_id) is not None

    def create_event(
        self,
        *,
        name: str,
        date: str | datetime,
        event_type: str | EventType,
        status: str | EventStatus = EventStatus.UPCOMING,
        event_id: Optional[str] = None,
        location: Optional[str] = None,
        cancellation_reason: Optional[str] = None,
        is_public: Any = False,
    ) -> Event:
        event_id = optional_text(event_id) or new_id("e")
        if self.exists(event_id):
            raise ValidationError("Event ID already exists")
        if date is None or date == "":
            raise ValidationError("Date is required")

        event = Event(
            event_id=event_id,
            name=require_non_empty(name, "Event name"),
            date=parse_iso_datetime(date),
            event_type=require_choice(event_type, EventType, "Event type"),
            status=require_choice(status, EventStatus, "Status"),
            location=optional_text(location),
            cancellation_reason=optional_text(cancellation_reason),
            is_public=_coerce_bool(is_public),
        )
        return self._events.create(event)

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Partial update: only the supplied fields are applied."""
        current = self.get_event(event_id)

        clean: dict[str, Any] = {}
        for field, value in changes.items():
            if field == "name":
                clean[field] = require_non_empty(value, "Event name")
            elif field == "date":
                if value is None or value == "":
                    raise ValidationError("Date is required")
                clean[field] = parse_iso_datetime(value)
            elif field == "event_type":
                clean[field] = require_choice(value, EventType, "Event type")
            elif field == "status":
                clean[field] = require_choice(value, EventStatus, "Status")
            elif field in ("location", "cancellation_reason"):
                clean[field] = optional_text(value)
            elif field == "is_public":
                clean[field] = _coerce_bool(value)

        if not clean:
            return current
        updated = self._events.update(event_id, clean)
        if not updated:
            raise NotFoundError("Event not found")
        return updated

    def cancel_event(self, event_id: str, reason: Optional[str] = None) -> Event:
        return self.update_event(event_id, {"status": EventStatus.CANCELLED, "cancellation_reason": reason})

    def delete_event(self, event_id: str) -> None:
        """Hard delete. Missing ids are not an error; attendance rows stay."""
        if not self._events.delete(event_id):
            logger.debug("Delete of unknown event %s ignored", event_id)
