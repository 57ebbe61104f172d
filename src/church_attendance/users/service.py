from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_text
from ..core.constants import INVALID_CREDENTIALS_MESSAGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """Public profile returned after login. Never carries the hash."""

    user_id: str
    name: str
    username: str
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "SessionUser":
        return cls(user_id=user.user_id, name=user.name, username=user.username, role=user.role)

    @classmethod
    def from_dict(cls, data: dict) -> "SessionUser":
        return cls(user_id=str(data["id"]), name=data["name"], username=data["username"], role=Role(data["role"]))

    def to_dict(self) -> dict:
        return {"id": self.user_id, "name": self.name, "username": self.username, "role": self.role.value}


class AuthService:
    """Use case: authenticate user (login).

    No lockout or rate limiting; unknown user and wrong password fail identically.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except Exception:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        return SessionUser.from_user(user)


class UserService:
    """Use case: the account holder edits their own profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def update_profile(
        self,
        user_id: str,
        *,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> SessionUser:
        if not self._users.get_by_id(user_id):
            raise NotFoundError("User not found")

        name = optional_text(name)
        username = optional_text(username)
        if username:
            owner = self._users.get_by_username(username)
            if owner and owner.user_id != user_id:
                raise ValidationError("Username already taken")

        password_hash = generate_password_hash(password) if password and password.strip() else None

        updated = self._users.update_user(user_id, name=name, username=username, password_hash=password_hash)
        if not updated:
            raise NotFoundError("User not found")
        return SessionUser.from_user(updated)

    def ensure_seed_users(self, seeds: Iterable[tuple[str, str, str, str, Role]]) -> int:
        """Create the fixed demo accounts when no user exists yet.

        ``seeds`` rows are (id, name, username, plaintext password, role).
        """
        if self._users.count() > 0:
            return 0
        created = 0
        for user_id, name, username, password, role in seeds:
            self._users.create_user(
                User(
                    user_id=user_id,
                    name=name,
                    username=username,
                    password_hash=generate_password_hash(password),
                    role=role,
                )
            )
            created += 1
        logger.info("Seeded %d demo user(s)", created)
        return created
