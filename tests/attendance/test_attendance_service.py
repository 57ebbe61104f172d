from datetime import datetime

import pytest

from church_attendance.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from church_attendance.attendance.model import AttendanceRecord
from church_attendance.core.constants import (
    DUPLICATE_ATTENDANCE_MESSAGE,
    MEMBER_ID_NOT_FOUND_MESSAGE,
    MEMBER_NOT_FOUND_MESSAGE,
)
from church_attendance.core.enums import CheckInMethod
from church_attendance.core.exceptions import InvalidReferenceError, NotFoundError, ValidationError


def test_record_requires_existing_member(container):
    with pytest.raises(InvalidReferenceError, match="Member"):
        container.attendance_service.record_attendance(event_id="e1", member_id="ZZZZZZ")


def test_record_requires_existing_event(container):
    with pytest.raises(InvalidReferenceError, match="Event"):
        container.attendance_service.record_attendance(event_id="nope", member_id="AB12C3")


def test_record_succeeds_when_both_references_exist(container):
    before = len(container.attendance_service.list_attendance())

    record = container.attendance_service.record_attendance(
        event_id="e4", member_id="GH77K1", method="qr", timestamp="2024-05-17T18:05:00Z"
    )

    assert record.method == CheckInMethod.QR
    assert record.attendance_id.startswith("att-")
    assert len(container.attendance_service.list_attendance()) == before + 1


def test_duplicate_check_ins_are_kept(container):
    for _ in range(2):
        container.attendance_service.record_attendance(event_id="e4", member_id="GH77K1")

    rows = [r for r in container.attendance_service.list_for_event("e4") if r.member_id == "GH77K1"]
    assert len(rows) == 2


def test_record_rejects_existing_attendance_id(container):
    original = container.attendance_repo.get_by_id("a1")

    with pytest.raises(ValidationError) as exc:
        container.attendance_service.record_attendance(attendance_id="a1", event_id="e3", member_id="JK88L9")

    assert str(exc.value) == DUPLICATE_ATTENDANCE_MESSAGE
    assert container.attendance_repo.get_by_id("a1") == original
    assert len(container.attendance_service.list_attendance()) == 5


def test_record_keeps_client_supplied_new_id(container):
    record = container.attendance_service.record_attendance(attendance_id=" a99 ", event_id="e3", member_id="JK88L9")

    assert record.attendance_id == "a99"
    assert container.attendance_repo.get_by_id("a99") == record


def test_memory_repository_never_overwrites():
    first = AttendanceRecord("a1", "e1", "AB12C3", datetime(2024, 5, 5, 9, 0), CheckInMethod.QR)
    repo = InMemoryAttendanceRepository([first])

    with pytest.raises(ValidationError):
        repo.create(AttendanceRecord("a1", "e3", "JK88L9", datetime(2024, 5, 12, 9, 0), CheckInMethod.MANUAL))

    assert repo.get_by_id("a1") == first


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("555 0101", "AB12C3"),
        ("(555)-0102", "XY98Z7"),
        ("  MARY@EXAMPLE.COM ", "TR33Q2"),
        ("david brown", "JK88L9"),
    ],
)
def test_self_check_in_matches_phone_email_or_name(container, identifier, expected):
    result = container.attendance_service.self_check_in("e4", identifier, now=datetime(2024, 5, 17, 18, 1))

    assert result.member.member_id == expected
    assert result.record.method == CheckInMethod.MANUAL
    assert result.record.timestamp == datetime(2024, 5, 17, 18, 1)
    assert result.to_dict()["success"] is True


def test_self_check_in_unknown_person(container):
    with pytest.raises(NotFoundError) as exc:
        container.attendance_service.self_check_in("e4", "nobody@example.com")
    assert str(exc.value) == MEMBER_NOT_FOUND_MESSAGE


def test_self_check_in_blank_identifier_never_matches(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.self_check_in("e4", "   ")


def test_self_check_in_unknown_event(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.self_check_in("nope", "john@example.com")


def test_kiosk_defaults_to_most_recent_event(container):
    result = container.attendance_service.kiosk_check_in(" ab12c3 ")

    assert result.event.event_id == "e12"
    assert result.member.member_id == "AB12C3"
    assert result.record.method == CheckInMethod.QR
    assert result.message == "Welcome, John! You are checked in."


def test_kiosk_explicit_event(container):
    result = container.attendance_service.kiosk_check_in("XY98Z7", event_id="e5")
    assert result.event.event_id == "e5"


def test_kiosk_unknown_member(container):
    with pytest.raises(NotFoundError) as exc:
        container.attendance_service.kiosk_check_in("QQQQQQ")
    assert str(exc.value) == MEMBER_ID_NOT_FOUND_MESSAGE


def test_kiosk_without_events(empty_container):
    with pytest.raises(NotFoundError):
        empty_container.attendance_service.kiosk_check_in("AB12C3")
