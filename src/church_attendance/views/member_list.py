"""Member list screen state: filters, pagination, the member form and bulk status."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local
from ..common.validators import is_valid_member_id
from ..core.constants import DEFAULT_PAGE_SIZE, MEMBER_ID_LENGTH
from ..core.enums import AttendanceWindow, MemberStatus
from ..core.exceptions import ValidationError
from ..events.model import Event
from ..gateway.client import DataGateway
from ..members.model import Member
from ..reports.filters import ALL, MemberFilter, filter_members
from ..reports.pagination import Page, paginate

logger = logging.getLogger(__name__)

SOME_UPDATES_FAILED = "Some updates failed"


class MemberListView:
    def __init__(
        self,
        gateway: DataGateway,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        clock: Callable[[], datetime] = now_local,
    ):
        self._gateway = gateway
        self._page_size = page_size
        self._clock = clock

        self.members: list[Member] = []
        self.events: list[Event] = []
        self.attendance: list[AttendanceRecord] = []
        self.criteria = MemberFilter()
        self.page = 1
        self.message: Optional[str] = None

    def load(self) -> None:
        self.members = self._gateway.list_members()
        self.events = self._gateway.list_events()
        self.attendance = self._gateway.list_attendance()
        self.current_page()

    # ---------- filters & paging ----------

    def set_filter(
        self,
        *,
        search: Optional[str] = None,
        status: Optional[str] = None,
        ministry: Optional[str] = None,
        attendance: Optional[str | AttendanceWindow] = None,
    ) -> None:
        """Change any subset of the filters. Always returns to page 1."""
        changes: dict[str, Any] = {}
        if search is not None:
            changes["search"] = search
        if status is not None:
            changes["status"] = status
        if ministry is not None:
            changes["ministry"] = ministry
        if attendance is not None:
            changes["attendance"] = AttendanceWindow(attendance)
        self.criteria = dataclasses.replace(self.criteria, **changes)
        self.page = 1

    def clear_filters(self) -> None:
        self.criteria = MemberFilter()
        self.page = 1

    @property
    def filtered(self) -> list[Member]:
        return filter_members(self.members, self.events, self.attendance, self.criteria, now=self._clock())

    def current_page(self) -> Page[Member]:
        result = paginate(self.filtered, self.page, self._page_size)
        self.page = result.page
        return result

    def go_to(self, page: int) -> Page[Member]:
        self.page = page
        return self.current_page()

    def ministries(self) -> list[str]:
        return [ALL] + sorted({m.ministry for m in self.members})

    # ---------- form ----------

    def validate_form(self, data: Mapping[str, Any], *, editing_id: Optional[str] = None) -> dict[str, str]:
        """Field errors found before any network call; empty when the form is valid."""
        errors: dict[str, str] = {}
        member_id = (data.get("id") or "").strip()
        if not is_valid_member_id(member_id):
            errors["id"] = f"Member ID must be {MEMBER_ID_LENGTH} uppercase letters or digits"
        elif member_id != editing_id and any(m.member_id == member_id for m in self.members):
            errors["id"] = "Member ID already exists"
        if not (data.get("firstName") or "").strip():
            errors["firstName"] = "First name is required"
        if not (data.get("lastName") or "").strip():
            errors["lastName"] = "Last name is required"
        if (data.get("status") or "") not in {s.value for s in MemberStatus}:
            errors["status"] = "Status is required"
        return errors

    def save(self, data: Mapping[str, Any], *, editing_id: Optional[str] = None) -> Member:
        errors = self.validate_form(data, editing_id=editing_id)
        if errors:
            raise ValidationError(next(iter(errors.values())))
        if editing_id:
            member = self._gateway.update_member(editing_id, data)
        else:
            member = self._gateway.create_member(data)
        self.load()
        return member

    def delete(self, member_id: str) -> None:
        self._gateway.delete_member(member_id)
        self.load()

    # ---------- bulk ----------

    def bulk_set_status(self, member_ids: Iterable[str], status: str | MemberStatus) -> Optional[str]:
        """Apply one status to many members, then reload authoritative state."""
        result = self._gateway.bulk_update_member_status(list(member_ids), status)
        self.load()
        if result.all_ok:
            self.message = f"Updated {len(result.succeeded)} member(s)"
        else:
            self.message = SOME_UPDATES_FAILED
        return self.message
