from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import EventStatus
from ..events.model import Event


def is_past(event: Event, now: Optional[datetime] = None) -> bool:
    """Derived from the clock, independently of the stored status."""
    return event.date < (now or now_local())


def display_status(event: Event, now: Optional[datetime] = None) -> str:
    if event.status == EventStatus.CANCELLED:
        return EventStatus.CANCELLED.value
    if event.status == EventStatus.COMPLETED or is_past(event, now):
        return EventStatus.COMPLETED.value
    return event.status.value


def board(events: Iterable[Event], now: Optional[datetime] = None) -> list[dict]:
    now = now or now_local()
    rows = []
    for event in sorted(events, key=lambda e: e.date, reverse=True):
        row = event.to_dict()
        row["isPast"] = is_past(event, now)
        row["badge"] = display_status(event, now)
        rows.append(row)
    return rows
