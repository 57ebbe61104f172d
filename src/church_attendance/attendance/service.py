from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local, parse_iso_datetime
from ..common.ids import new_id
from ..common.validators import optional_text, require_choice
from ..core.constants import (
    DUPLICATE_ATTENDANCE_MESSAGE,
    MEMBER_ID_NOT_FOUND_MESSAGE,
    MEMBER_NOT_FOUND_MESSAGE,
    MISSING_EVENT_MESSAGE,
    MISSING_MEMBER_MESSAGE,
)
from ..core.enums import CheckInMethod
from ..core.exceptions import InvalidReferenceError, NotFoundError, ValidationError
from ..events.model import Event, most_recent_event
from ..events.repository import EventRepository
from ..members.model import Member
from ..members.repository import MemberRepository
from .matching import find_member_by_identifier
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    record: AttendanceRecord
    member: Member
    event: Event

    @property
    def message(self) -> str:
        return f"Welcome, {self.member.first_name}! You are checked in."

    def to_dict(self) -> dict:
        return {
            "success": True,
            "message": self.message,
            "attendance": self.record.to_dict(),
            "member": {"id": self.member.member_id, "firstName": self.member.first_name},
            "event": {"id": self.event.event_id, "name": self.event.name},
        }


class AttendanceService:
    """Check-ins. Duplicate (event, member) records are allowed."""

    def __init__(self, attendance: AttendanceRepository, members: MemberRepository, events: EventRepository):
        self._attendance = attendance
        self._members = members
        self._events = events

    def list_attendance(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def list_for_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_event(event_id)

    def record_attendance(
        self,
        *,
        event_id: str,
        member_id: str,
        method: str | CheckInMethod = CheckInMethod.MANUAL,
        timestamp: Optional[str | datetime] = None,
        attendance_id: Optional[str] = None,
    ) -> AttendanceRecord:
        """Insert a check-in after checking both references exist."""
        method = require_choice(method, CheckInMethod, "Method")
        if not member_id or not self._members.get_by_id(member_id):
            raise InvalidReferenceError(MISSING_MEMBER_MESSAGE)
        if not event_id or not self._events.get_by_id(event_id):
            raise InvalidReferenceError(MISSING_EVENT_MESSAGE)

        attendance_id = optional_text(attendance_id) or new_id("att")
        if self._attendance.get_by_id(attendance_id):
            raise ValidationError(DUPLICATE_ATTENDANCE_MESSAGE)

        record = AttendanceRecord(
            attendance_id=attendance_id,
            event_id=event_id,
            member_id=member_id,
            timestamp=parse_iso_datetime(timestamp) if timestamp else now_local(),
            method=method,
        )
        created = self._attendance.create(record)
        logger.info("Check-in %s: member=%s event=%s via %s", created.attendance_id, member_id, event_id, method.value)
        return created

    def self_check_in(self, event_id: str, identifier: str, *, now: Optional[datetime] = None) -> CheckInResult:
        """Public check-in page: find the member by phone, email or full name."""
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")

        member = find_member_by_identifier(self._members.list_all(), identifier)
        if not member:
            raise NotFoundError(MEMBER_NOT_FOUND_MESSAGE)

        record = self.record_attendance(
            event_id=event.event_id,
            member_id=member.member_id,
            method=CheckInMethod.MANUAL,
            timestamp=now,
        )
        return CheckInResult(record=record, member=member, event=event)

    def kiosk_check_in(
        self, member_id: str, *, event_id: Optional[str] = None, now: Optional[datetime] = None
    ) -> CheckInResult:
        """Kiosk scan or typed id. Defaults to the most recent event by date."""
        if event_id:
            event = self._events.get_by_id(event_id)
        else:
            event = most_recent_event(self._events.list_all())
        if not event:
            raise NotFoundError("Event not found")

        member = self._members.get_by_id((member_id or "").strip().upper())
        if not member:
            raise NotFoundError(MEMBER_ID_NOT_FOUND_MESSAGE)

        record = self.record_attendance(
            event_id=event.event_id,
            member_id=member.member_id,
            method=CheckInMethod.QR,
            timestamp=now,
        )
        return CheckInResult(record=record, member=member, event=event)
