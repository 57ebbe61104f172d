from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Operator roles. Checked by the client session, not by the API."""

    ADMIN = "admin"
    SECRETARY = "secretary"
    VOLUNTEER = "volunteer"


class MemberStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class EventType(str, Enum):
    SERVICE = "service"
    YOUTH = "youth"
    OUTREACH = "outreach"
    MEETING = "meeting"


class EventStatus(str, Enum):
    """Operator-set lifecycle. Never derived from the event date."""

    UPCOMING = "upcoming"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class CheckInMethod(str, Enum):
    QR = "qr"
    MANUAL = "manual"


class AttendanceWindow(str, Enum):
    """Attendance-recency modes of the member list filter."""

    ALL = "all"
    NEVER = "never"
    LAST_SERVICE = "last_service"
    LAST_30_DAYS = "last_30_days"
    LAST_90_DAYS = "last_90_days"

    @property
    def days(self) -> int | None:
        return {AttendanceWindow.LAST_30_DAYS: 30, AttendanceWindow.LAST_90_DAYS: 90}.get(self)
