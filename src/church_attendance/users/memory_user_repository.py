from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from ..database.memory_base import MemoryTable
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Iterable[User] = ()):
        self._table: MemoryTable[User] = MemoryTable(users, key=lambda u: u.user_id)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._table.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._table.all() if u.username == username), None)

    def create_user(self, user: User) -> User:
        return self._table.put(user)

    def update_user(
        self,
        user_id: str,
        *,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> Optional[User]:
        with self._table.lock:
            user = self._table.get(user_id)
            if not user:
                return None
            changes = {
                k: v
                for k, v in (("name", name), ("username", username), ("password_hash", password_hash))
                if v is not None
            }
            return self._table.put(replace(user, **changes))

    def count(self) -> int:
        return len(self._table.all())
