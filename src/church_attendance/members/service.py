from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, parse_iso_date
from ..common.ids import generate_member_id
from ..common.validators import optional_text, require_choice, require_member_id, require_non_empty
from ..core.constants import DEFAULT_MINISTRY
from ..core.enums import MemberStatus
from ..core.exceptions import NotFoundError, ValidationError
from .csv_import import parse_member_csv
from .model import ImportResult, Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    def __init__(self, members: MemberRepository, attendance: Optional[AttendanceRepository] = None):
        self._members = members
        self._attendance = attendance

    def list_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def get_member(self, member_id: str) -> Member:
        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Member not found")
        return member

    def exists(self, member_id: str) -> bool:
        return self._members.get_by_id(member_id) is not None

    def generate_id(self) -> str:
        return generate_member_id(self.exists)

    def create_member(
        self,
        *,
        member_id: str,
        first_name: str,
        last_name: str,
        status: str | MemberStatus,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        join_date: Optional[str | date] = None,
        ministry: Optional[str] = None,
    ) -> Member:
        member_id = require_member_id(member_id)
        if self.exists(member_id):
            raise ValidationError("Member ID already exists")

        member = Member(
            member_id=member_id,
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
            email=optional_text(email),
            phone=optional_text(phone),
            join_date=self._coerce_date(join_date) or now_local().date(),
            status=require_choice(status, MemberStatus, "Status"),
            ministry=optional_text(ministry) or DEFAULT_MINISTRY,
        )
        return self._members.create(member)

    def update_member(self, member_id: str, changes: Mapping[str, Any]) -> Member:
        """Partial update: only the supplied fields are applied."""
        current = self.get_member(member_id)
        clean = self._clean_changes(current, changes)

        updated = self._members.update(member_id, clean) if clean else current
        if not updated:
            raise NotFoundError("Member not found")

        new_id = clean.get("member_id")
        if new_id and new_id != member_id and self._attendance is not None:
            moved = self._attendance.reassign_member(member_id, new_id)
            logger.info("Member %s renamed to %s (%d attendance rows moved)", member_id, new_id, moved)
        return updated

    def update_status(self, member_id: str, status: str | MemberStatus) -> Member:
        return self.update_member(member_id, {"status": status})

    def delete_member(self, member_id: str) -> None:
        """Hard delete. Missing ids are not an error."""
        if not self._members.delete(member_id):
            logger.debug("Delete of unknown member %s ignored", member_id)

    def import_csv(self, text: str) -> ImportResult:
        """Create one member per CSV row; each insert stands alone."""
        rows, skipped = parse_member_csv(text or "")
        created: list[Member] = []
        for row in rows:
            try:
                created.append(
                    self.create_member(
                        member_id=self.generate_id(),
                        first_name=row.first_name,
                        last_name=row.last_name,
                        email=row.email,
                        phone=row.phone,
                        ministry=row.ministry,
                        status=MemberStatus.ACTIVE,
                    )
                )
            except ValidationError as e:
                logger.warning("Skipping CSV row %s %s: %s", row.first_name, row.last_name, e)
                skipped += 1
        return ImportResult(created=created, skipped=skipped)

    def _clean_changes(self, current: Member, changes: Mapping[str, Any]) -> dict[str, Any]:
        clean: dict[str, Any] = {}
        for field, value in changes.items():
            if field == "member_id":
                if value == current.member_id:
                    continue
                new_id = require_member_id(value)
                if self.exists(new_id):
                    raise ValidationError("Member ID already exists")
                clean[field] = new_id
            elif field in ("first_name", "last_name"):
                label = "First name" if field == "first_name" else "Last name"
                clean[field] = require_non_empty(value, label)
            elif field in ("email", "phone"):
                clean[field] = optional_text(value)
            elif field == "ministry":
                clean[field] = optional_text(value) or DEFAULT_MINISTRY
            elif field == "status":
                clean[field] = require_choice(value, MemberStatus, "Status")
            elif field == "join_date":
                clean[field] = self._coerce_date(value)
        return clean

    @staticmethod
    def _coerce_date(value: Optional[str | date]) -> Optional[date]:
        if value is None or value == "":
            return None
        if isinstance(value, date):
            return value
        return parse_iso_date(str(value))
