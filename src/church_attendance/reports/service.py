from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_PAGE_SIZE, DEFAULT_TOP_ATTENDEES
from ..core.exceptions import NotFoundError, ValidationError
from ..events.repository import EventRepository
from ..members.model import Member
from ..members.repository import MemberRepository
from . import aggregates
from .aggregates import DateRange
from .filters import MemberFilter, filter_members
from .pagination import Page, paginate


class ReportService:
    """Read-side use cases: search, absentees, dashboard and range reports."""

    def __init__(self, members: MemberRepository, events: EventRepository, attendance: AttendanceRepository):
        self._members = members
        self._events = events
        self._attendance = attendance

    def search_members(
        self,
        criteria: MemberFilter,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        now: Optional[datetime] = None,
    ) -> Page[Member]:
        matched = filter_members(
            self._members.list_all(),
            self._events.list_all(),
            self._attendance.list_all(),
            criteria,
            now=now or now_local(),
        )
        return paginate(matched, page, page_size)

    def absentees(self, event_id: str) -> list[Member]:
        if not self._events.get_by_id(event_id):
            raise NotFoundError("Event not found")
        return aggregates.absentees(event_id, self._members.list_all(), self._attendance.list_for_event(event_id))

    def member_history(self, member_id: str) -> list[dict]:
        if not self._members.get_by_id(member_id):
            raise NotFoundError("Member not found")
        history = aggregates.member_history(member_id, self._attendance.list_all(), self._events.list_all())
        return [{**record.to_dict(), "event": event.to_dict()} for record, event in history]

    def dashboard(self) -> dict:
        return aggregates.dashboard_summary(
            self._members.list_all(), self._events.list_all(), self._attendance.list_all()
        )

    def summary(self, start: date, end: date, *, top: int = DEFAULT_TOP_ATTENDEES) -> dict:
        if end < start:
            raise ValidationError("End date must not be before start date")
        if top < 1:
            raise ValidationError("top must be at least 1")
        window = DateRange(start=start, end=end)
        members = self._members.list_all()
        events = self._events.list_all()
        attendance = self._attendance.list_all()

        return {
            "start": start.strftime("%Y-%m-%d"),
            "end": end.strftime("%Y-%m-%d"),
            "memberStatus": aggregates.status_counts(members),
            "attendanceByType": aggregates.attendance_by_type(attendance, events, window),
            "methodSplit": aggregates.method_split(attendance, events, window),
            "topAttendees": [
                {"member": m.to_dict(), "count": n}
                for m, n in aggregates.top_attendees(members, attendance, events, window, limit=top)
            ],
            "events": [e.to_dict() for e in aggregates.events_in_range(events, window)],
        }
