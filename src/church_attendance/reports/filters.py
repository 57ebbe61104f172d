"""Member list filtering.

A member is kept when every criterion matches: free text, status, ministry
and attendance recency.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceWindow, EventStatus, EventType
from ..events.model import Event
from ..members.model import Member

ALL = "all"


@dataclass(frozen=True)
class MemberFilter:
    search: str = ""
    status: str = ALL
    ministry: str = ALL
    attendance: AttendanceWindow = AttendanceWindow.ALL


def latest_completed_service(events: Iterable[Event]) -> Optional[Event]:
    services = [e for e in events if e.event_type == EventType.SERVICE and e.status == EventStatus.COMPLETED]
    return max(services, key=lambda e: e.date) if services else None


def last_attended_at(
    member_id: str,
    attendance: Iterable[AttendanceRecord],
    events_by_id: Mapping[str, Event],
) -> Optional[datetime]:
    """Latest attended-event date, using the record timestamp when the event is gone."""
    latest: Optional[datetime] = None
    for record in attendance:
        if record.member_id != member_id:
            continue
        event = events_by_id.get(record.event_id)
        when = event.date if event else record.timestamp
        if latest is None or when > latest:
            latest = when
    return latest


def _matches_text(member: Member, needle: str) -> bool:
    if not needle:
        return True
    needle = needle.lower()
    return (
        needle in member.full_name.lower()
        or needle in (member.email or "").lower()
        or needle in member.member_id.lower()
    )


def filter_members(
    members: Sequence[Member],
    events: Sequence[Event],
    attendance: Sequence[AttendanceRecord],
    criteria: MemberFilter,
    *,
    now: datetime,
) -> list[Member]:
    events_by_id = {e.event_id: e for e in events}
    attended_ids = {r.member_id for r in attendance}

    last_service_ids: set[str] = set()
    if criteria.attendance == AttendanceWindow.LAST_SERVICE:
        service = latest_completed_service(events)
        if service:
            last_service_ids = {r.member_id for r in attendance if r.event_id == service.event_id}

    window_days = criteria.attendance.days
    cutoff = now - timedelta(days=window_days) if window_days else None

    out: list[Member] = []
    for member in members:
        if not _matches_text(member, criteria.search.strip()):
            continue
        if criteria.status != ALL and member.status.value != criteria.status:
            continue
        if criteria.ministry != ALL and member.ministry != criteria.ministry:
            continue

        mode = criteria.attendance
        if mode == AttendanceWindow.NEVER and member.member_id in attended_ids:
            continue
        if mode == AttendanceWindow.LAST_SERVICE and member.member_id not in last_service_ids:
            continue
        if cutoff is not None:
            latest = last_attended_at(member.member_id, attendance, events_by_id)
            if latest is None or latest < cutoff:
                continue
        out.append(member)
    return out
