from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Event


class EventRepository(Protocol):
    def list_all(self) -> Sequence[Event]:
        """All events, newest first."""

        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def create(self, event: Event) -> Event:
        raise NotImplementedError

    def update(self, event_id: str, changes: Mapping[str, Any]) -> Optional[Event]:
        raise NotImplementedError

    def delete(self, event_id: str) -> bool:
        raise NotImplementedError
