from datetime import datetime

import pytest

from church_attendance.core.enums import EventStatus, EventType
from church_attendance.core.exceptions import NotFoundError, ValidationError
from church_attendance.events.model import most_recent_event
from church_attendance.views.event_board import board, display_status, is_past


def test_create_event_generates_id(empty_container):
    event = empty_container.event_service.create_event(
        name="Prayer Meeting", date="2024-07-01T19:00", event_type="meeting", location=" Hall "
    )

    assert event.event_id.startswith("e-")
    assert event.status == EventStatus.UPCOMING
    assert event.location == "Hall"
    assert empty_container.event_service.get_event(event.event_id) == event


def test_create_event_rejects_unknown_type(empty_container):
    with pytest.raises(ValidationError):
        empty_container.event_service.create_event(name="X", date="2024-07-01T19:00", event_type="party")


def test_create_event_requires_date(empty_container):
    with pytest.raises(ValidationError):
        empty_container.event_service.create_event(name="X", date="", event_type="service")


def test_create_event_with_duplicate_id(container):
    with pytest.raises(ValidationError):
        container.event_service.create_event(event_id="e1", name="X", date="2024-07-01", event_type="service")


def test_events_list_newest_first(container):
    dates = [e.date for e in container.event_service.list_events()]
    assert dates == sorted(dates, reverse=True)


def test_partial_update_keeps_other_fields(container):
    event = container.event_service.update_event("e5", {"status": "in-progress"})

    assert event.status == EventStatus.IN_PROGRESS
    assert event.name == "Sunday Service"
    assert event.event_type == EventType.SERVICE


def test_cancel_event_records_reason(container):
    event = container.event_service.cancel_event("e8", "Snow")

    assert event.status == EventStatus.CANCELLED
    assert event.cancellation_reason == "Snow"


def test_update_unknown_event(container):
    with pytest.raises(NotFoundError):
        container.event_service.update_event("nope", {"name": "X"})


def test_delete_is_idempotent(container):
    container.event_service.delete_event("e11")
    container.event_service.delete_event("e11")

    assert not container.event_service.exists("e11")


def test_display_status_follows_the_clock(container):
    now = datetime(2024, 5, 20, 12, 0)
    upcoming_but_past = container.event_service.get_event("e5")
    future = container.event_service.get_event("e12")

    assert is_past(upcoming_but_past, now)
    assert display_status(upcoming_but_past, now) == "completed"
    assert display_status(future, now) == "upcoming"

    cancelled = container.event_service.cancel_event("e12")
    assert display_status(cancelled, now) == "cancelled"


def test_board_rows_carry_flags(container):
    rows = board(container.event_service.list_events(), datetime(2024, 5, 20, 12, 0))

    assert rows[0]["id"] == "e12"
    assert rows[0]["isPast"] is False
    assert rows[-1]["badge"] == "completed"


def test_most_recent_event_ignores_status(container):
    container.event_service.cancel_event("e12", "Weather")

    assert most_recent_event(container.event_service.list_events()).event_id == "e12"
    assert most_recent_event([]) is None
