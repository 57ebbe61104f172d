from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_date, parse_iso_date
from ..core.constants import DEFAULT_MINISTRY
from ..core.enums import MemberStatus

# Wire (camelCase JSON) name -> dataclass field name.
WIRE_FIELDS = {
    "id": "member_id",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "joinDate": "join_date",
    "status": "status",
    "ministry": "ministry",
}


@dataclass(frozen=True)
class Member:
    """A person tracked for attendance, keyed by a six-character id."""

    member_id: str
    first_name: str
    last_name: str
    email: Optional[str]
    phone: Optional[str]
    join_date: Optional[date]
    status: MemberStatus
    ministry: str = DEFAULT_MINISTRY

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.member_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email or "",
            "phone": self.phone or "",
            "joinDate": format_date(self.join_date),
            "status": self.status.value,
            "ministry": self.ministry or DEFAULT_MINISTRY,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Member":
        return cls(
            member_id=data["id"],
            first_name=data["firstName"],
            last_name=data["lastName"],
            email=data.get("email") or None,
            phone=data.get("phone") or None,
            join_date=parse_iso_date(data["joinDate"]) if data.get("joinDate") else None,
            status=MemberStatus(data["status"]),
            ministry=data.get("ministry") or DEFAULT_MINISTRY,
        )


@dataclass(frozen=True)
class ImportResult:
    created: list[Member]
    skipped: int

    def to_dict(self) -> dict:
        return {"created": [m.to_dict() for m in self.created], "skipped": self.skipped}
