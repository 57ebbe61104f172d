from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..database.memory_base import MemoryTable
from .model import Event
from .repository import EventRepository


class InMemoryEventRepository(EventRepository):
    def __init__(self, events: Iterable[Event] = ()):
        self._table: MemoryTable[Event] = MemoryTable(events, key=lambda e: e.event_id)

    def list_all(self) -> Sequence[Event]:
        return sorted(self._table.all(), key=lambda e: e.date, reverse=True)

    def get_by_id(self, event_id: str) -> Optional[Event]:
        return self._table.get(event_id)

    def create(self, event: Event) -> Event:
        return self._table.put(event)

    def update(self, event_id: str, changes: Mapping[str, Any]) -> Optional[Event]:
        with self._table.lock:
            event = self._table.get(event_id)
            if not event:
                return None
            return self._table.put(replace(event, **changes))

    def delete(self, event_id: str) -> bool:
        return self._table.delete(event_id)
