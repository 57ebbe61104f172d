from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..core.constants import DUPLICATE_ATTENDANCE_MESSAGE
from ..core.exceptions import ValidationError
from ..database.memory_base import MemoryTable
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._table: MemoryTable[AttendanceRecord] = MemoryTable(records, key=lambda r: r.attendance_id)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return sorted(self._table.all(), key=lambda r: r.timestamp)

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        return self._table.get(attendance_id)

    def list_for_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self.list_all() if r.event_id == event_id]

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        with self._table.lock:
            if self._table.get(record.attendance_id):
                raise ValidationError(DUPLICATE_ATTENDANCE_MESSAGE)
            return self._table.put(record)

    def reassign_member(self, old_member_id: str, new_member_id: str) -> int:
        moved = 0
        with self._table.lock:
            for record in self._table.all():
                if record.member_id == old_member_id:
                    self._table.put(replace(record, member_id=new_member_id))
                    moved += 1
        return moved
