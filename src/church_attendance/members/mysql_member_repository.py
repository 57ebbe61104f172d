from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_MINISTRY
from ..core.enums import MemberStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository

_COLUMNS = "id, first_name, last_name, email, phone, join_date, status, ministry"

_FIELD_COLUMNS = {
    "member_id": "id",
    "first_name": "first_name",
    "last_name": "last_name",
    "email": "email",
    "phone": "phone",
    "join_date": "join_date",
    "status": "status",
    "ministry": "ministry",
}


def _to_member(row: dict) -> Member:
    join_date = row.get("join_date")
    # DATETIME columns come back as datetime; keep the plain date.
    if join_date is not None and hasattr(join_date, "date"):
        join_date = join_date.date()
    return Member(
        member_id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row.get("email"),
        phone=row.get("phone"),
        join_date=join_date,
        status=MemberStatus(row["status"]),
        ministry=row.get("ministry") or DEFAULT_MINISTRY,
    )


def _db_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY last_name ASC")
            return [_to_member(r) for r in fetchall(cur)]

    def get_by_id(self, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE id=%s", (member_id,))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def create(self, member: Member) -> Member:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO members(id, first_name, last_name, email, phone, join_date, status, ministry)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    member.member_id,
                    member.first_name,
                    member.last_name,
                    member.email,
                    member.phone,
                    member.join_date,
                    member.status.value,
                    member.ministry,
                ),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE id=%s", (member.member_id,))
            return _to_member(fetchone(cur))

    def update(self, member_id: str, changes: Mapping[str, Any]) -> Optional[Member]:
        columns = {_FIELD_COLUMNS[k]: _db_value(v) for k, v in changes.items() if k in _FIELD_COLUMNS}
        new_id = changes.get("member_id", member_id)
        with db_cursor(self._conn_factory) as (_, cur):
            if columns:
                sql, params = build_update("members", columns, key_column="id", key=member_id)
                cur.execute(sql, params)
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE id=%s", (new_id,))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def delete(self, member_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM members WHERE id=%s", (member_id,))
            return cur.rowcount > 0
