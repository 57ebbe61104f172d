"""Client Data Gateway.

One method per entity operation. Every call goes to the HTTP API first; when
the API cannot be reached the same request is replayed against the
in-process mirror store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

import requests

from ..app_settings.model import AppSettings
from ..attendance.model import AttendanceRecord
from ..common.validators import require_member_id
from ..core.constants import GATEWAY_TIMEOUT_SECONDS, MISSING_EVENT_MESSAGE, MISSING_MEMBER_MESSAGE
from ..core.enums import CheckInMethod, MemberStatus
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidReferenceError,
    NotFoundError,
    ServerFaultError,
    TransientUnavailableError,
    ValidationError,
)
from ..events.model import Event
from ..guests.model import Guest
from ..members.model import Member
from ..users.service import SessionUser
from .mirror import MirrorStore, Reply

logger = logging.getLogger(__name__)

ERRORS_BY_STATUS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
}

# 400 bodies from attendance creation that name a missing member or event.
MISSING_REFERENCE_MESSAGES = frozenset({MISSING_MEMBER_MESSAGE, MISSING_EVENT_MESSAGE})


@dataclass
class BulkResult:
    succeeded: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def all_ok(self) -> bool:
        return not self.failed


class DataGateway:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = GATEWAY_TIMEOUT_SECONDS,
        mirror: Optional[MirrorStore] = None,
        session: Optional[requests.Session] = None,
        fallback: bool = True,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = float(timeout)
        self._session = session or requests.Session()
        self._mirror = mirror
        self._fallback = fallback
        if fallback and mirror is None:
            self._mirror = MirrorStore()
        # True while the last call was served by the mirror.
        self.degraded = False

    @property
    def mirror(self) -> Optional[MirrorStore]:
        return self._mirror

    # ---------- transport ----------

    def _send(self, method: str, path: str, *, json: Any = None, params: Optional[dict] = None) -> Reply:
        try:
            resp = self._session.request(
                method, f"{self._base_url}{path}", json=json, params=params, timeout=self._timeout
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            if not self._fallback or self._mirror is None:
                raise TransientUnavailableError(f"Service unreachable: {method} {path}") from e
            logger.warning("%s %s failed (%s); using in-memory mirror", method, path, e)
            self.degraded = True
            return self._mirror.request(method, path, json=json, params=params)

        self.degraded = False
        try:
            body = resp.json()
        except ValueError:
            body = None
        return Reply(status=resp.status_code, body=body)

    def _call(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[dict] = None,
        reference_errors: frozenset[str] = frozenset(),
    ) -> Any:
        reply = self._send(method, path, json=json, params=params)
        if reply.status < 400:
            return reply.body

        message = reply.body.get("error") if isinstance(reply.body, dict) else None
        if reply.status == 400:
            if message in reference_errors:
                raise InvalidReferenceError(message)
            raise ValidationError(message or "Bad request")
        error_cls = ERRORS_BY_STATUS.get(reply.status, ServerFaultError)
        raise error_cls(message or f"HTTP {reply.status}")

    # ---------- users ----------

    def login(self, username: str, password: str) -> SessionUser:
        body = self._call("POST", "/auth/login", json={"username": username, "password": password})
        return SessionUser.from_dict(body)

    def update_user(
        self,
        user_id: str,
        *,
        name: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> SessionUser:
        payload = {k: v for k, v in {"name": name, "username": username, "password": password}.items() if v is not None}
        return SessionUser.from_dict(self._call("PUT", f"/users/{user_id}", json=payload))

    # ---------- settings ----------

    def get_settings(self) -> AppSettings:
        return AppSettings.from_dict(self._call("GET", "/settings"))

    def update_settings(self, changes: Mapping[str, Any]) -> AppSettings:
        return AppSettings.from_dict(self._call("PUT", "/settings", json=dict(changes)))

    # ---------- members ----------

    def list_members(self) -> list[Member]:
        return [Member.from_dict(row) for row in self._call("GET", "/members")]

    def create_member(self, data: Mapping[str, Any]) -> Member:
        require_member_id(data.get("id"))
        return Member.from_dict(self._call("POST", "/members", json=dict(data)))

    def update_member(self, member_id: str, changes: Mapping[str, Any]) -> Member:
        if "id" in changes:
            require_member_id(changes["id"])
        return Member.from_dict(self._call("PUT", f"/members/{member_id}", json=dict(changes)))

    def delete_member(self, member_id: str) -> None:
        self._call("DELETE", f"/members/{member_id}")

    def bulk_update_member_status(self, member_ids: Iterable[str], status: str | MemberStatus) -> BulkResult:
        """One independent update per member; failures do not roll back the others."""
        value = status.value if isinstance(status, MemberStatus) else status
        result = BulkResult()
        for member_id in member_ids:
            try:
                self.update_member(member_id, {"status": value})
            except DomainError as e:
                logger.warning("Status update for %s failed: %s", member_id, e)
                result.failed.append(member_id)
            else:
                result.succeeded.append(member_id)
        return result

    # ---------- events ----------

    def list_events(self) -> list[Event]:
        return [Event.from_dict(row) for row in self._call("GET", "/events")]

    def create_event(self, data: Mapping[str, Any]) -> Event:
        return Event.from_dict(self._call("POST", "/events", json=dict(data)))

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        return Event.from_dict(self._call("PUT", f"/events/{event_id}", json=dict(changes)))

    def delete_event(self, event_id: str) -> None:
        self._call("DELETE", f"/events/{event_id}")

    # ---------- attendance ----------

    def list_attendance(self) -> list[AttendanceRecord]:
        return [AttendanceRecord.from_dict(row) for row in self._call("GET", "/attendance")]

    def create_attendance(
        self,
        event_id: str,
        member_id: str,
        method: str | CheckInMethod = CheckInMethod.MANUAL,
        timestamp: Optional[str] = None,
    ) -> AttendanceRecord:
        payload = {
            "eventId": event_id,
            "memberId": member_id,
            "method": method.value if isinstance(method, CheckInMethod) else method,
        }
        if timestamp:
            payload["timestamp"] = timestamp
        body = self._call("POST", "/attendance", json=payload, reference_errors=MISSING_REFERENCE_MESSAGES)
        return AttendanceRecord.from_dict(body)

    def member_history(self, member_id: str) -> list[tuple[AttendanceRecord, Event]]:
        """A member's check-ins with their events, newest event first."""
        rows = self._call("GET", f"/members/{member_id}/history")
        return [(AttendanceRecord.from_dict(row), Event.from_dict(row["event"])) for row in rows]

    # ---------- guests ----------

    def list_guests(self) -> list[Guest]:
        return [Guest.from_dict(row) for row in self._call("GET", "/guests")]

    def create_guest(self, data: Mapping[str, Any]) -> Guest:
        return Guest.from_dict(self._call("POST", "/guests", json=dict(data)))

    def update_guest(self, guest_id: str, changes: Mapping[str, Any]) -> Guest:
        return Guest.from_dict(self._call("PUT", f"/guests/{guest_id}", json=dict(changes)))

    def delete_guest(self, guest_id: str) -> None:
        self._call("DELETE", f"/guests/{guest_id}")
