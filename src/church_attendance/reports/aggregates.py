"""Pure report functions over already-loaded collections.

An event is in range when ``start <= event.date <= end_of_day(end)``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import end_of_day
from ..core.constants import DEFAULT_RECENT_EVENTS, DEFAULT_TOP_ATTENDEES
from ..core.enums import CheckInMethod, EventStatus, EventType, MemberStatus
from ..events.model import Event
from ..members.model import Member
from .filters import latest_completed_service


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def contains(self, event: Event) -> bool:
        return self.start <= event.date.date() and event.date <= end_of_day(self.end)


def events_in_range(events: Iterable[Event], window: DateRange) -> list[Event]:
    return sorted((e for e in events if window.contains(e)), key=lambda e: e.date)


def records_in_range(
    attendance: Iterable[AttendanceRecord], events: Iterable[Event], window: DateRange
) -> list[AttendanceRecord]:
    in_range = {e.event_id for e in events_in_range(events, window)}
    return [r for r in attendance if r.event_id in in_range]


def status_counts(members: Iterable[Member]) -> dict[str, int]:
    counts = Counter(m.status.value for m in members)
    return {s.value: counts.get(s.value, 0) for s in MemberStatus}


def attendance_by_type(
    attendance: Iterable[AttendanceRecord], events: Sequence[Event], window: DateRange
) -> dict[str, int]:
    type_of = {e.event_id: e.event_type.value for e in events_in_range(events, window)}
    counts = Counter(type_of[r.event_id] for r in attendance if r.event_id in type_of)
    return {t.value: counts.get(t.value, 0) for t in EventType}


def method_split(
    attendance: Iterable[AttendanceRecord], events: Sequence[Event], window: DateRange
) -> dict[str, int]:
    counts = Counter(r.method.value for r in records_in_range(attendance, events, window))
    return {m.value: counts.get(m.value, 0) for m in CheckInMethod}


def top_attendees(
    members: Sequence[Member],
    attendance: Iterable[AttendanceRecord],
    events: Sequence[Event],
    window: DateRange,
    *,
    limit: int = DEFAULT_TOP_ATTENDEES,
) -> list[tuple[Member, int]]:
    """Members ranked by in-range check-ins, descending. Tie order is unspecified."""
    counts = Counter(r.member_id for r in records_in_range(attendance, events, window))
    by_id = {m.member_id: m for m in members}
    ranked = [(by_id[mid], n) for mid, n in counts.most_common() if mid in by_id]
    return ranked[:limit]


def absentees(event_id: str, members: Iterable[Member], attendance: Iterable[AttendanceRecord]) -> list[Member]:
    """Active members with no record for the event."""
    present = {r.member_id for r in attendance if r.event_id == event_id}
    return [m for m in members if m.is_active and m.member_id not in present]


def member_history(
    member_id: str, attendance: Iterable[AttendanceRecord], events: Iterable[Event]
) -> list[tuple[AttendanceRecord, Event]]:
    """A member's check-ins joined with their events, newest event first.

    Records whose event has been deleted are left out.
    """
    by_id = {e.event_id: e for e in events}
    joined = [(r, by_id[r.event_id]) for r in attendance if r.member_id == member_id and r.event_id in by_id]
    return sorted(joined, key=lambda pair: pair[1].date, reverse=True)


def attendance_counts(attendance: Iterable[AttendanceRecord]) -> Counter:
    return Counter(r.event_id for r in attendance)


def attendance_trend(events: Iterable[Event], attendance: Iterable[AttendanceRecord]) -> list[dict]:
    counts = attendance_counts(attendance)
    return [
        {
            "eventId": e.event_id,
            "name": e.name,
            "date": e.date.strftime("%Y-%m-%d"),
            "type": e.event_type.value,
            "attendees": counts.get(e.event_id, 0),
        }
        for e in sorted(events, key=lambda e: e.date)
    ]


def _previous_completed_service(events: Sequence[Event], latest: Event) -> Optional[Event]:
    earlier = [
        e
        for e in events
        if e.event_type == EventType.SERVICE and e.status == EventStatus.COMPLETED and e.date < latest.date
    ]
    return max(earlier, key=lambda e: e.date) if earlier else None


def dashboard_summary(
    members: Sequence[Member],
    events: Sequence[Event],
    attendance: Sequence[AttendanceRecord],
    *,
    recent: int = DEFAULT_RECENT_EVENTS,
) -> dict:
    counts = attendance_counts(attendance)
    trend = attendance_trend(events, attendance)
    average = round(sum(p["attendees"] for p in trend) / len(trend)) if trend else 0

    last_service = latest_completed_service(events)
    last_count = counts.get(last_service.event_id, 0) if last_service else 0
    growth = 0.0
    if last_service:
        previous = _previous_completed_service(events, last_service)
        previous_count = counts.get(previous.event_id, 0) if previous else 0
        if previous_count:
            growth = round((last_count - previous_count) / previous_count * 100, 1)

    recent_events = sorted(events, key=lambda e: e.date, reverse=True)[:recent]
    return {
        "totalMembers": len(members),
        "activeMembers": sum(1 for m in members if m.is_active),
        "averageAttendance": average,
        "lastServiceAttendance": last_count,
        "growthRate": growth,
        "trend": trend,
        "recentEvents": [{**e.to_dict(), "attendees": counts.get(e.event_id, 0)} for e in recent_events],
    }
