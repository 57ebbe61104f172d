import pytest

from church_attendance.core.exceptions import AuthenticationError, AuthorizationError
from church_attendance.core.permissions import Permission
from church_attendance.gateway.client import DataGateway
from church_attendance.gateway.mirror import MirrorStore
from church_attendance.gateway.session import ClientSession

from .fakes import DownSession


@pytest.fixture
def session():
    gateway = DataGateway("http://church.invalid/api", session=DownSession(), mirror=MirrorStore(latency=0))
    return ClientSession(gateway)


def test_volunteer_may_only_run_the_kiosk(session):
    session.login("volunteer", "password")

    assert session.can(Permission.RUN_KIOSK)
    assert not session.can(Permission.MANAGE_MEMBERS)
    with pytest.raises(AuthorizationError):
        session.require(Permission.MANAGE_SETTINGS)


def test_admin_may_do_everything(session):
    session.login("admin", "password")

    assert all(session.can(p) for p in Permission)


def test_signed_out(session):
    assert not session.is_authenticated
    assert not session.can(Permission.RUN_KIOSK)
    with pytest.raises(AuthenticationError):
        session.require(Permission.RUN_KIOSK)


def test_logout_forgets_the_user(session):
    session.login("admin", "password")
    session.logout()

    assert session.user is None


def test_update_profile_refreshes_session(session):
    session.login("admin", "password")

    session.update_profile(name="Sarah A.")

    assert session.user.name == "Sarah A."
