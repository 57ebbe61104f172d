import logging

import pytest
import requests

from church_attendance.core.enums import CheckInMethod, MemberStatus
from church_attendance.core.exceptions import (
    AuthenticationError,
    InvalidReferenceError,
    NotFoundError,
    ServerFaultError,
    TransientUnavailableError,
    ValidationError,
)
from church_attendance.gateway.client import DataGateway
from church_attendance.gateway.mirror import MirrorStore

from .fakes import CannedSession, DownSession, FakeResponse, LiveSession

BASE_URL = "http://church.invalid/api"


@pytest.fixture
def mirror():
    return MirrorStore(latency=0)


@pytest.fixture
def offline(mirror):
    return DataGateway(BASE_URL, session=DownSession(), mirror=mirror)


def test_unreachable_api_falls_back_to_mirror(offline):
    members = offline.list_members()

    assert offline.degraded
    assert len(members) == 12
    assert members[0].last_name == "Anderson"


def test_timeout_also_falls_back(mirror):
    gateway = DataGateway(BASE_URL, session=DownSession(requests.Timeout("slow")), mirror=mirror)

    assert len(gateway.list_events()) == 12


def test_mirror_mutations_persist_for_the_process(offline):
    offline.create_member({"id": "AB12CD", "firstName": "Ann", "lastName": "Lee", "status": "active"})

    assert "AB12CD" in {m.member_id for m in offline.list_members()}


def test_mirror_enforces_attendance_references(offline):
    with pytest.raises(InvalidReferenceError):
        offline.create_attendance("e1", "ZZZZZZ", CheckInMethod.QR)

    record = offline.create_attendance("e1", "GH77K1", CheckInMethod.QR)
    assert record.member_id == "GH77K1"


def test_mirror_login(offline):
    assert offline.login("admin", "password").username == "admin"
    with pytest.raises(AuthenticationError):
        offline.login("admin", "bad")


def test_mirror_latency_is_simulated():
    pauses = []
    mirror = MirrorStore(latency=0.2, sleep=pauses.append)
    gateway = DataGateway(BASE_URL, session=DownSession(), mirror=mirror)

    gateway.get_settings()

    assert pauses == [0.2]


def test_mirror_leaves_process_setup_alone(monkeypatch):
    calls = []
    monkeypatch.setattr("church_attendance.main.load_dotenv", lambda *a, **kw: calls.append("dotenv"))
    monkeypatch.setattr(logging, "basicConfig", lambda *a, **kw: calls.append("basicConfig"))

    mirror = MirrorStore(latency=0)

    assert mirror.request("GET", "/settings").status == 200
    assert calls == []


def test_without_fallback_unreachable_is_raised():
    gateway = DataGateway(BASE_URL, session=DownSession(), fallback=False)

    with pytest.raises(TransientUnavailableError):
        gateway.list_members()
    assert gateway.mirror is None


@pytest.mark.parametrize("bad_id", ["abc123", "AB12", "AB12CD9"])
def test_member_id_is_checked_before_any_request(bad_id):
    session = DownSession()
    gateway = DataGateway(BASE_URL, session=session, fallback=False)

    with pytest.raises(ValidationError):
        gateway.create_member({"id": bad_id, "firstName": "Ann", "lastName": "Lee", "status": "active"})
    with pytest.raises(ValidationError):
        gateway.update_member("AB12C3", {"id": bad_id})
    assert session.calls == []


@pytest.mark.parametrize(
    "status, error",
    [(400, ValidationError), (401, AuthenticationError), (404, NotFoundError), (500, ServerFaultError)],
)
def test_http_errors_map_to_exceptions(status, error):
    gateway = DataGateway(BASE_URL, session=CannedSession(FakeResponse(status, {"error": "boom"})), fallback=False)

    with pytest.raises(error, match="boom"):
        gateway.list_members()


def test_attendance_400_is_an_invalid_reference():
    session = CannedSession(FakeResponse(400, {"error": "Event does not exist"}))
    gateway = DataGateway(BASE_URL, session=session, fallback=False)

    with pytest.raises(InvalidReferenceError):
        gateway.create_attendance("nope", "AB12C3")


def test_other_attendance_400s_stay_validation_errors():
    session = CannedSession(FakeResponse(400, {"error": "Method must be one of: qr, manual"}))
    gateway = DataGateway(BASE_URL, session=session, fallback=False)

    with pytest.raises(ValidationError) as exc:
        gateway.create_attendance("e1", "AB12C3", "sms")
    assert not isinstance(exc.value, InvalidReferenceError)


def test_mirror_rejects_invalid_method_as_validation_error(offline):
    with pytest.raises(ValidationError) as exc:
        offline.create_attendance("e1", "GH77K1", "sms")
    assert not isinstance(exc.value, InvalidReferenceError)


def test_member_history_newest_event_first(offline):
    history = offline.member_history("AB12C3")

    assert [(record.attendance_id, event.event_id) for record, event in history] == [("a3", "e3"), ("a1", "e1")]


def test_server_error_without_json_body():
    gateway = DataGateway(BASE_URL, session=CannedSession(FakeResponse(502)), fallback=False)

    with pytest.raises(ServerFaultError, match="HTTP 502"):
        gateway.list_events()


def test_live_api_is_used_when_reachable(client, mirror):
    session = LiveSession(client, "http://testserver")
    gateway = DataGateway("http://testserver/api/", session=session, mirror=mirror)

    gateway.delete_member("AB12C3")

    assert not gateway.degraded
    assert session.calls == [("DELETE", "http://testserver/api/members/AB12C3")]
    # Only the live store changed.
    assert len(gateway.list_members()) == 11
    assert len(mirror.container.member_service.list_members()) == 12


def test_bulk_status_update_reports_failures(offline):
    result = offline.bulk_update_member_status(["AB12C3", "ZZZZZZ", "XY98Z7"], MemberStatus.INACTIVE)

    assert result.succeeded == ["AB12C3", "XY98Z7"]
    assert result.failed == ["ZZZZZZ"]
    assert not result.all_ok
    statuses = {m.member_id: m.status for m in offline.list_members()}
    assert statuses["AB12C3"] == MemberStatus.INACTIVE


def test_settings_and_guests_round_trip(offline):
    offline.update_settings({"churchName": "Grace Chapel"})
    guest = offline.create_guest(
        {"eventId": "e4", "firstName": "Tom", "lastName": "Guest", "homeChurch": "Grace Chapel"}
    )

    assert offline.get_settings().church_name == "Grace Chapel"
    assert offline.update_guest(guest.guest_id, {"phone": "555-0199"}).phone == "555-0199"
    offline.delete_guest(guest.guest_id)
    assert offline.list_guests() == []
