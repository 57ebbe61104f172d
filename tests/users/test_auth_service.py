import pytest

from church_attendance.core.constants import INVALID_CREDENTIALS_MESSAGE
from church_attendance.core.enums import Role
from church_attendance.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from church_attendance.database.demo_data import DEMO_USERS


def test_login_returns_profile_without_hash(container):
    user = container.auth_service.authenticate("admin", "password")

    assert user.role == Role.ADMIN
    assert user.to_dict() == {"id": "u2", "name": "Sarah Admin", "username": "admin", "role": "admin"}


def test_wrong_password_and_unknown_user_fail_identically(container):
    with pytest.raises(AuthenticationError) as wrong_password:
        container.auth_service.authenticate("admin", "nope")
    with pytest.raises(AuthenticationError) as unknown_user:
        container.auth_service.authenticate("ghost", "password")

    assert str(wrong_password.value) == str(unknown_user.value) == INVALID_CREDENTIALS_MESSAGE


def test_update_profile_rehashes_password(container):
    container.user_service.update_profile("u4", password="s3cret!")

    assert container.auth_service.authenticate("volunteer", "s3cret!").user_id == "u4"
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("volunteer", "password")


def test_update_profile_blank_password_keeps_old_one(container):
    profile = container.user_service.update_profile("u4", name="Michael Vol", password="   ")

    assert profile.name == "Michael Vol"
    assert container.auth_service.authenticate("volunteer", "password").name == "Michael Vol"


def test_update_profile_rejects_taken_username(container):
    with pytest.raises(ValidationError):
        container.user_service.update_profile("u4", username="admin")


def test_update_profile_unknown_user(container):
    with pytest.raises(NotFoundError):
        container.user_service.update_profile("u99", name="Nobody")


def test_seed_users_only_on_empty_table(container):
    assert container.user_service.ensure_seed_users(DEMO_USERS) == 0
