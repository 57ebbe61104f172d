from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Guest


class GuestRepository(Protocol):
    def list_all(self) -> Sequence[Guest]:
        """All guests, most recent registration first."""

        raise NotImplementedError

    def get_by_id(self, guest_id: str) -> Optional[Guest]:
        raise NotImplementedError

    def create(self, guest: Guest) -> Guest:
        raise NotImplementedError

    def update(self, guest_id: str, changes: Mapping[str, Any]) -> Optional[Guest]:
        raise NotImplementedError

    def delete(self, guest_id: str) -> bool:
        raise NotImplementedError
