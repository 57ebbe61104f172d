from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.constants import DUPLICATE_ATTENDANCE_MESSAGE
from ..core.enums import CheckInMethod
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, event_id, member_id, timestamp, method"


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=row["id"],
        event_id=row["event_id"],
        member_id=row["member_id"],
        timestamp=row["timestamp"],
        method=CheckInMethod(row["method"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance ORDER BY timestamp ASC")
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE id=%s", (attendance_id,))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def list_for_event(self, event_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE event_id=%s ORDER BY timestamp ASC",
                (event_id,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO attendance(id, event_id, member_id, timestamp, method) VALUES(%s,%s,%s,%s,%s)",
                    (record.attendance_id, record.event_id, record.member_id, record.timestamp, record.method.value),
                )
        except mysql.connector.IntegrityError as exc:
            raise ValidationError(DUPLICATE_ATTENDANCE_MESSAGE) from exc
        return record

    def reassign_member(self, old_member_id: str, new_member_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance SET member_id=%s WHERE member_id=%s", (new_member_id, old_member_id))
            return int(cur.rowcount)
