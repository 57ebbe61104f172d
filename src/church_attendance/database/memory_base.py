from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class MemoryTable(Generic[T]):
    """Dict-backed table of frozen records keyed by id.

    Non-durable: lives as long as the owning object. Used by the client
    mirror store and by tests in place of MySQL.
    """

    def __init__(self, rows: Iterable[T] = (), *, key: Callable[[T], str]):
        self._key = key
        self._lock = threading.RLock()
        self._rows: Dict[str, T] = {}
        for row in rows:
            self._rows[key(row)] = row

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def get(self, row_id: str) -> Optional[T]:
        with self._lock:
            return self._rows.get(row_id)

    def all(self) -> List[T]:
        with self._lock:
            return list(self._rows.values())

    def put(self, row: T) -> T:
        with self._lock:
            self._rows[self._key(row)] = row
            return row

    def replace(self, old_id: str, row: T) -> T:
        with self._lock:
            self._rows.pop(old_id, None)
            self._rows[self._key(row)] = row
            return row

    def delete(self, row_id: str) -> bool:
        with self._lock:
            return self._rows.pop(row_id, None) is not None
