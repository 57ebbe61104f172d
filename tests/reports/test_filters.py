from datetime import datetime

from church_attendance.attendance.model import AttendanceRecord
from church_attendance.core.enums import AttendanceWindow, CheckInMethod
from church_attendance.reports.filters import MemberFilter, filter_members


def _ids(container, now, **criteria):
    members = filter_members(
        container.member_service.list_members(),
        container.event_service.list_events(),
        container.attendance_service.list_attendance(),
        MemberFilter(**criteria),
        now=now,
    )
    return {m.member_id for m in members}


def test_no_criteria_keeps_everyone(container, fixed_now):
    assert len(_ids(container, fixed_now)) == 12


def test_never_means_zero_attendance_rows(container, fixed_now):
    attended = {"AB12C3", "XY98Z7", "TR33Q2", "JK88L9"}
    everyone = {m.member_id for m in container.member_service.list_members()}

    assert _ids(container, fixed_now, attendance=AttendanceWindow.NEVER) == everyone - attended


def test_last_service_uses_latest_completed_service(container, fixed_now):
    assert _ids(container, fixed_now, attendance=AttendanceWindow.LAST_SERVICE) == {"AB12C3", "TR33Q2", "JK88L9"}


def test_last_service_without_completed_service_matches_nobody(container, fixed_now):
    for event_id in ("e1", "e3"):
        container.event_service.update_event(event_id, {"status": "upcoming"})

    assert _ids(container, fixed_now, attendance=AttendanceWindow.LAST_SERVICE) == set()


def test_last_30_days_is_measured_from_now(container):
    # Cutoff 2024-05-09: only the 12 May service is recent enough.
    now = datetime(2024, 6, 8, 9, 0)

    assert _ids(container, now, attendance=AttendanceWindow.LAST_30_DAYS) == {"AB12C3", "TR33Q2", "JK88L9"}
    assert _ids(container, now, attendance=AttendanceWindow.LAST_90_DAYS) == {"AB12C3", "XY98Z7", "TR33Q2", "JK88L9"}


def test_recency_falls_back_to_record_timestamp(container):
    container.event_service.delete_event("e3")
    orphan = AttendanceRecord(
        attendance_id="x1",
        event_id="deleted",
        member_id="QA11S2",
        timestamp=datetime(2024, 6, 1, 10, 0),
        method=CheckInMethod.QR,
    )
    container.attendance_repo.create(orphan)

    ids = _ids(container, datetime(2024, 6, 8, 9, 0), attendance=AttendanceWindow.LAST_30_DAYS)

    # e3 rows now resolve through their own timestamps (12 May).
    assert ids == {"QA11S2", "AB12C3", "TR33Q2", "JK88L9"}


def test_text_search_matches_name_email_or_id(container, fixed_now):
    assert _ids(container, fixed_now, search="jane smith") == {"XY98Z7"}
    assert _ids(container, fixed_now, search="LINDA@") == {"UY88H3"}
    assert _ids(container, fixed_now, search="ab12") == {"AB12C3"}


def test_criteria_are_combined(container, fixed_now):
    ids = _ids(container, fixed_now, status="active", ministry="Ladies' Ministry", attendance=AttendanceWindow.NEVER)

    assert ids == {"GH77K1", "UY88H3"}


def test_inactive_filter(container, fixed_now):
    assert _ids(container, fixed_now, status="inactive") == {"MN45P6", "PL99O0"}
