from datetime import date, datetime

import pytest

from church_attendance.core.exceptions import NotFoundError, ValidationError


def test_absentees_scenario(empty_container):
    c = empty_container
    for member_id, first in (("AB12CD", "Ann"), ("XY99ZZ", "Xavier")):
        c.member_service.create_member(member_id=member_id, first_name=first, last_name="Lee", status="active")
    c.event_service.create_event(
        event_id="e1", name="Sunday Service", date="2024-05-05T09:00", event_type="service", status="completed"
    )

    c.attendance_service.record_attendance(event_id="e1", member_id="AB12CD", method="qr")

    assert len(c.attendance_service.list_attendance()) == 1
    assert [m.member_id for m in c.report_service.absentees("e1")] == ["XY99ZZ"]


def test_absentees_skip_inactive_members(container):
    absent = {m.member_id for m in container.report_service.absentees("e3")}

    assert "MN45P6" not in absent
    assert absent.isdisjoint({"AB12C3", "TR33Q2", "JK88L9"})
    assert len(absent) == 7


def test_absentees_unknown_event(container):
    with pytest.raises(NotFoundError):
        container.report_service.absentees("nope")


def test_dashboard(container):
    summary = container.report_service.dashboard()

    assert summary["totalMembers"] == 12
    assert summary["activeMembers"] == 10
    assert summary["lastServiceAttendance"] == 3
    assert summary["growthRate"] == 50.0
    assert [p["eventId"] for p in summary["trend"]][:3] == ["e1", "e2", "e3"]
    assert [e["id"] for e in summary["recentEvents"]] == ["e12", "e11", "e10", "e9", "e8"]


def test_summary_for_a_date_range(container):
    report = container.report_service.summary(date(2024, 5, 1), date(2024, 5, 12))

    assert [e["id"] for e in report["events"]] == ["e1", "e2", "e3"]
    assert report["attendanceByType"]["service"] == 5
    assert report["methodSplit"] == {"qr": 4, "manual": 1}
    assert report["memberStatus"] == {"active": 10, "inactive": 2}
    top = report["topAttendees"][0]
    assert (top["member"]["id"], top["count"]) == ("AB12C3", 2)


def test_summary_end_date_is_inclusive_to_end_of_day(container):
    inclusive = container.report_service.summary(date(2024, 5, 12), date(2024, 5, 12))
    before = container.report_service.summary(date(2024, 5, 1), date(2024, 5, 11))

    assert inclusive["attendanceByType"]["service"] == 3
    assert before["attendanceByType"]["service"] == 2


def test_summary_rejects_reversed_range(container):
    with pytest.raises(ValidationError):
        container.report_service.summary(date(2024, 5, 12), date(2024, 5, 1))


def test_search_members_pages_filtered_set(container):
    from church_attendance.core.enums import AttendanceWindow
    from church_attendance.reports.filters import MemberFilter

    page = container.report_service.search_members(
        MemberFilter(attendance=AttendanceWindow.NEVER), page=2, now=datetime(2024, 5, 20)
    )

    assert (page.total, page.total_pages, page.page, len(page.items)) == (8, 2, 2, 3)


def test_summary_rejects_non_positive_top(container):
    for top in (0, -1):
        with pytest.raises(ValidationError):
            container.report_service.summary(date(2024, 5, 1), date(2024, 5, 12), top=top)


def test_member_history_newest_event_first(container):
    container.attendance_service.record_attendance(event_id="e2", member_id="AB12C3")
    container.event_service.delete_event("e1")

    history = container.report_service.member_history("AB12C3")

    assert [row["event"]["id"] for row in history] == ["e3", "e2"]
    assert history[0]["id"] == "a3"
    assert history[0]["memberId"] == "AB12C3"


def test_member_history_unknown_member(container):
    with pytest.raises(NotFoundError):
        container.report_service.member_history("QQQQQQ")
