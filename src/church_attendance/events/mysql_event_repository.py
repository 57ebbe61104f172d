from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import EventStatus, EventType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetchall, fetchone
from .model import Event
from .repository import EventRepository

_COLUMNS = "id, name, date, location, type, status, cancellation_reason, is_public"

_FIELD_COLUMNS = {
    "name": "name",
    "date": "date",
    "location": "location",
    "event_type": "type",
    "status": "status",
    "cancellation_reason": "cancellation_reason",
    "is_public": "is_public",
}


def _to_event(row: dict) -> Event:
    return Event(
        event_id=row["id"],
        name=row["name"],
        date=row["date"],
        location=row.get("location"),
        event_type=EventType(row["type"]),
        status=EventStatus(row["status"]),
        cancellation_reason=row.get("cancellation_reason"),
        is_public=bool(row.get("is_public")),
    )


def _db_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events ORDER BY date DESC")
            return [_to_event(r) for r in fetchall(cur)]

    def get_by_id(self, event_id: str) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id=%s", (event_id,))
            row = fetchone(cur)
            return _to_event(row) if row else None

    def create(self, event: Event) -> Event:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO events(id, name, date, location, type, status, cancellation_reason, is_public)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    event.event_id,
                    event.name,
                    event.date,
                    event.location,
                    event.event_type.value,
                    event.status.value,
                    event.cancellation_reason,
                    int(event.is_public),
                ),
            )
        return event

    def update(self, event_id: str, changes: Mapping[str, Any]) -> Optional[Event]:
        columns = {_FIELD_COLUMNS[k]: _db_value(v) for k, v in changes.items() if k in _FIELD_COLUMNS}
        with db_cursor(self._conn_factory) as (_, cur):
            if columns:
                sql, params = build_update("events", columns, key_column="id", key=event_id)
                cur.execute(sql, params)
            cur.execute(f"SELECT {_COLUMNS} FROM events WHERE id=%s", (event_id,))
            row = fetchone(cur)
            return _to_event(row) if row else None

    def delete(self, event_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM events WHERE id=%s", (event_id,))
            return cur.rowcount > 0
