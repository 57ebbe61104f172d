from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..database.memory_base import MemoryTable
from .model import Member
from .repository import MemberRepository


class InMemoryMemberRepository(MemberRepository):
    def __init__(self, members: Iterable[Member] = ()):
        self._table: MemoryTable[Member] = MemoryTable(members, key=lambda m: m.member_id)

    def list_all(self) -> Sequence[Member]:
        return sorted(self._table.all(), key=lambda m: m.last_name)

    def get_by_id(self, member_id: str) -> Optional[Member]:
        return self._table.get(member_id)

    def create(self, member: Member) -> Member:
        return self._table.put(member)

    def update(self, member_id: str, changes: Mapping[str, Any]) -> Optional[Member]:
        with self._table.lock:
            member = self._table.get(member_id)
            if not member:
                return None
            return self._table.replace(member_id, replace(member, **changes))

    def delete(self, member_id: str) -> bool:
        return self._table.delete(member_id)
