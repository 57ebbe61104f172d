from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_PAGE_SIZE
from ..events.model import Event
from ..gateway.client import DataGateway
from ..guests.model import Guest
from ..reports.filters import ALL
from ..reports.pagination import Page, paginate


class GuestListView:
    """Guest registrations with text search, an event filter and paging."""

    def __init__(self, gateway: DataGateway, *, page_size: int = DEFAULT_PAGE_SIZE):
        self._gateway = gateway
        self._page_size = page_size
        self.guests: list[Guest] = []
        self.events: list[Event] = []
        self.search = ""
        self.event_id = ALL
        self.page = 1

    def load(self) -> None:
        self.guests = self._gateway.list_guests()
        self.events = self._gateway.list_events()

    def public_events(self) -> list[Event]:
        return [e for e in self.events if e.is_public]

    def set_filter(self, *, search: Optional[str] = None, event_id: Optional[str] = None) -> None:
        if search is not None:
            self.search = search
        if event_id is not None:
            self.event_id = event_id
        self.page = 1

    @property
    def filtered(self) -> list[Guest]:
        needle = self.search.strip().lower()
        out = []
        for guest in self.guests:
            if self.event_id != ALL and guest.event_id != self.event_id:
                continue
            if needle and not (
                needle in guest.full_name.lower()
                or needle in (guest.email or "").lower()
                or needle in guest.home_church.lower()
            ):
                continue
            out.append(guest)
        return out

    def current_page(self) -> Page[Guest]:
        result = paginate(self.filtered, self.page, self._page_size)
        self.page = result.page
        return result

    def go_to(self, page: int) -> Page[Guest]:
        self.page = page
        return self.current_page()

    def event_name(self, event_id: str) -> str:
        for event in self.events:
            if event.event_id == event_id:
                return event.name
        return "Unknown event"
