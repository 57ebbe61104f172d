from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction: commit on success, rollback on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def build_update(table: str, columns: Dict[str, Any], *, key_column: str, key: Any) -> tuple[str, tuple]:
    """Build ``UPDATE table SET a=%s, b=%s WHERE key=%s`` for the given columns."""
    assignments = ", ".join(f"{col}=%s" for col in columns)
    sql = f"UPDATE {table} SET {assignments} WHERE {key_column}=%s"
    return sql, (*columns.values(), key)
