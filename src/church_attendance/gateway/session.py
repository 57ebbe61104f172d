from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import AuthenticationError, AuthorizationError
from ..core.permissions import Permission, has_permission
from ..users.service import SessionUser
from .client import DataGateway

logger = logging.getLogger(__name__)


class ClientSession:
    """The signed-in operator, held in memory for the life of the client.

    Role checks happen here, not in the HTTP service.
    """

    def __init__(self, gateway: DataGateway):
        self._gateway = gateway
        self.user: Optional[SessionUser] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, username: str, password: str) -> SessionUser:
        self.user = self._gateway.login(username, password)
        logger.info("Signed in as %s (%s)", self.user.username, self.user.role.value)
        return self.user

    def logout(self) -> None:
        self.user = None

    def update_profile(
        self, *, name: Optional[str] = None, username: Optional[str] = None, password: Optional[str] = None
    ) -> SessionUser:
        current = self._current()
        self.user = self._gateway.update_user(current.user_id, name=name, username=username, password=password)
        return self.user

    def can(self, permission: Permission) -> bool:
        return self.user is not None and has_permission(self.user.role, permission)

    def require(self, permission: Permission) -> SessionUser:
        current = self._current()
        if not has_permission(current.role, permission):
            raise AuthorizationError(f"Role {current.role.value} may not {permission.value}")
        return current

    def _current(self) -> SessionUser:
        if self.user is None:
            raise AuthenticationError("Not signed in")
        return self.user
