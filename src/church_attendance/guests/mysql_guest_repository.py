from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import Guest
from .repository import GuestRepository

_COLUMNS = "id, event_id, first_name, last_name, email, phone, home_church, registration_date"

_FIELD_COLUMNS = {
    "event_id": "event_id",
    "first_name": "first_name",
    "last_name": "last_name",
    "email": "email",
    "phone": "phone",
    "home_church": "home_church",
}


def _to_guest(row: dict) -> Guest:
    return Guest(
        guest_id=row["id"],
        event_id=row["event_id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row.get("email"),
        phone=row.get("phone"),
        home_church=row["home_church"],
        registration_date=row["registration_date"],
    )


class MySQLGuestRepository(GuestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Guest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM guests ORDER BY registration_date DESC")
            return [_to_guest(r) for r in fetchall(cur)]

    def get_by_id(self, guest_id: str) -> Optional[Guest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM guests WHERE id=%s", (guest_id,))
            row = fetchone(cur)
            return _to_guest(row) if row else None

    def create(self, guest: Guest) -> Guest:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO guests(id, event_id, first_name, last_name, email, phone, home_church, registration_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    guest.guest_id,
                    guest.event_id,
                    guest.first_name,
                    guest.last_name,
                    guest.email,
                    guest.phone,
                    guest.home_church,
                    guest.registration_date,
                ),
            )
        return guest

    def update(self, guest_id: str, changes: Mapping[str, Any]) -> Optional[Guest]:
        columns = {_FIELD_COLUMNS[k]: v for k, v in changes.items() if k in _FIELD_COLUMNS}
        with db_cursor(self._conn_factory) as (_, cur):
            if columns:
                sql, params = build_update("guests", columns, key_column="id", key=guest_id)
                cur.execute(sql, params)
            cur.execute(f"SELECT {_COLUMNS} FROM guests WHERE id=%s", (guest_id,))
            row = fetchone(cur)
            return _to_guest(row) if row else None

    def delete(self, guest_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM guests WHERE id=%s", (guest_id,))
            return cur.rowcount > 0
