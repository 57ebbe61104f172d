from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import format_datetime, parse_iso_datetime
from ..core.enums import CheckInMethod


@dataclass(frozen=True)
class AttendanceRecord:
    """Append-only fact: member X was present at event Y at time T via method M."""

    attendance_id: str
    event_id: str
    member_id: str
    timestamp: datetime
    method: CheckInMethod

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "eventId": self.event_id,
            "memberId": self.member_id,
            "timestamp": format_datetime(self.timestamp),
            "method": self.method.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        return cls(
            attendance_id=str(data["id"]),
            event_id=data["eventId"],
            member_id=data["memberId"],
            timestamp=parse_iso_datetime(data["timestamp"]),
            method=CheckInMethod(data["method"]),
        )
