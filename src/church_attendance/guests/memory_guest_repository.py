from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..database.memory_base import MemoryTable
from .model import Guest
from .repository import GuestRepository


class InMemoryGuestRepository(GuestRepository):
    def __init__(self, guests: Iterable[Guest] = ()):
        self._table: MemoryTable[Guest] = MemoryTable(guests, key=lambda g: g.guest_id)

    def list_all(self) -> Sequence[Guest]:
        return sorted(self._table.all(), key=lambda g: g.registration_date, reverse=True)

    def get_by_id(self, guest_id: str) -> Optional[Guest]:
        return self._table.get(guest_id)

    def create(self, guest: Guest) -> Guest:
        return self._table.put(guest)

    def update(self, guest_id: str, changes: Mapping[str, Any]) -> Optional[Guest]:
        with self._table.lock:
            guest = self._table.get(guest_id)
            if not guest:
                return None
            return self._table.put(replace(guest, **changes))

    def delete(self, guest_id: str) -> bool:
        return self._table.delete(guest_id)
