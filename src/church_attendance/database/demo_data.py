"""Fixed demonstration data.

Seeds the in-process mirror store and ``scripts/seed_db.py``.
"""

from __future__ import annotations

from datetime import date, datetime

from ..attendance.model import AttendanceRecord
from ..core.enums import CheckInMethod, EventStatus, EventType, MemberStatus, Role
from ..events.model import Event
from ..members.model import Member

DEMO_PASSWORD = "password"

# (id, name, username, plaintext password, role)
DEMO_USERS = [
    ("u2", "Sarah Admin", "admin", DEMO_PASSWORD, Role.ADMIN),
    ("u4", "Mike Vol", "volunteer", DEMO_PASSWORD, Role.VOLUNTEER),
]


def _member(member_id, first, last, email, phone, joined, status, ministry) -> Member:
    return Member(
        member_id=member_id,
        first_name=first,
        last_name=last,
        email=email,
        phone=phone,
        join_date=date.fromisoformat(joined),
        status=MemberStatus(status),
        ministry=ministry,
    )


def _event(event_id, name, when, event_type, status, *, is_public=False) -> Event:
    return Event(
        event_id=event_id,
        name=name,
        date=datetime.fromisoformat(when),
        event_type=EventType(event_type),
        status=EventStatus(status),
        is_public=is_public,
    )


def _record(attendance_id, event_id, member_id, when, method) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=attendance_id,
        event_id=event_id,
        member_id=member_id,
        timestamp=datetime.fromisoformat(when),
        method=CheckInMethod(method),
    )


def demo_members() -> list[Member]:
    return [
        _member("AB12C3", "John", "Doe", "john@example.com", "555-0101", "2023-01-15", "active", "Men's Ministry"),
        _member("XY98Z7", "Jane", "Smith", "jane@example.com", "555-0102", "2023-02-20", "active", "Ladies' Ministry"),
        _member("MN45P6", "Robert", "Johnson", "bob@example.com", "555-0103", "2022-11-05", "inactive", "None"),
        _member("TR33Q2", "Mary", "Williams", "mary@example.com", "555-0104", "2023-06-10", "active", "Music Ministry"),
        _member("JK88L9", "David", "Brown", "david@example.com", "555-0105", "2024-01-01", "active", "Children's Ministry"),
        _member("GH77K1", "Sarah", "Davis", "sarah@example.com", "555-0106", "2024-02-01", "active", "Ladies' Ministry"),
        _member("WE22R4", "Michael", "Miller", "mike@example.com", "555-0107", "2024-02-15", "active", "Men's Ministry"),
        _member("PL99O0", "Jessica", "Wilson", "jess@example.com", "555-0108", "2024-03-01", "inactive", "None"),
        _member("QA11S2", "Daniel", "Moore", "dan@example.com", "555-0109", "2024-03-10", "active", "Music Ministry"),
        _member("ZX44C5", "Emily", "Taylor", "emily@example.com", "555-0110", "2024-03-20", "active", "Children's Ministry"),
        _member("VB66N7", "James", "Anderson", "james@example.com", "555-0111", "2024-04-01", "active", "Men's Ministry"),
        _member("UY88H3", "Linda", "Thomas", "linda@example.com", "555-0112", "2024-04-15", "active", "Ladies' Ministry"),
    ]


def demo_events() -> list[Event]:
    return [
        _event("e1", "Sunday Service", "2024-05-05T09:00:00", "service", "completed"),
        _event("e2", "Midweek Bible Study", "2024-05-08T19:00:00", "meeting", "completed"),
        _event("e3", "Sunday Service", "2024-05-12T09:00:00", "service", "completed"),
        _event("e4", "Youth Night", "2024-05-17T18:00:00", "youth", "upcoming", is_public=True),
        _event("e5", "Sunday Service", "2024-05-19T09:00:00", "service", "upcoming"),
        _event("e6", "Worship Night", "2024-05-24T19:00:00", "service", "upcoming", is_public=True),
        _event("e7", "Sunday Service", "2024-05-26T09:00:00", "service", "upcoming"),
        _event("e8", "Leaders Meeting", "2024-05-28T18:00:00", "meeting", "upcoming"),
        _event("e9", "Community Outreach", "2024-06-01T10:00:00", "outreach", "upcoming", is_public=True),
        _event("e10", "Sunday Service", "2024-06-02T09:00:00", "service", "upcoming"),
        _event("e11", "Bible Study", "2024-06-05T19:00:00", "meeting", "upcoming"),
        _event("e12", "Youth Camp", "2024-06-10T08:00:00", "youth", "upcoming", is_public=True),
    ]


def demo_attendance() -> list[AttendanceRecord]:
    return [
        _record("a1", "e1", "AB12C3", "2024-05-05T08:55:00", "qr"),
        _record("a2", "e1", "XY98Z7", "2024-05-05T09:05:00", "qr"),
        _record("a3", "e3", "AB12C3", "2024-05-12T08:50:00", "qr"),
        _record("a4", "e3", "TR33Q2", "2024-05-12T09:00:00", "manual"),
        _record("a5", "e3", "JK88L9", "2024-05-12T09:10:00", "qr"),
    ]
