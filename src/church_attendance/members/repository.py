from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    def list_all(self) -> Sequence[Member]:
        """All members ordered by last name ascending."""

        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError

    def create(self, member: Member) -> Member:
        raise NotImplementedError

    def update(self, member_id: str, changes: Mapping[str, Any]) -> Optional[Member]:
        """Apply the given field changes (dataclass field names).

        A ``member_id`` key renames the member. Returns None when missing.
        """

        raise NotImplementedError

    def delete(self, member_id: str) -> bool:
        raise NotImplementedError
