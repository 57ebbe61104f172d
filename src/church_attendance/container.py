from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .app_settings.memory_settings_repository import InMemorySettingsRepository
from .app_settings.mysql_settings_repository import MySQLSettingsRepository
from .app_settings.repository import SettingsRepository
from .app_settings.service import SettingsService
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .database.demo_data import DEMO_USERS, demo_attendance, demo_events, demo_members
from .events.memory_event_repository import InMemoryEventRepository
from .events.mysql_event_repository import MySQLEventRepository
from .events.repository import EventRepository
from .events.service import EventService
from .guests.memory_guest_repository import InMemoryGuestRepository
from .guests.mysql_guest_repository import MySQLGuestRepository
from .guests.repository import GuestRepository
from .guests.service import GuestService
from .insights.gemini_client import GeminiTextGenerator
from .insights.service import InsightService, TextGenerator
from .members.memory_member_repository import InMemoryMemberRepository
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .reports.service import ReportService
from .users.memory_user_repository import InMemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    settings_repo: SettingsRepository
    members_repo: MemberRepository
    events_repo: EventRepository
    attendance_repo: AttendanceRepository
    guests_repo: GuestRepository

    auth_service: AuthService
    user_service: UserService
    settings_service: SettingsService
    member_service: MemberService
    event_service: EventService
    attendance_service: AttendanceService
    guest_service: GuestService
    report_service: ReportService
    insight_service: InsightService


def _wire(
    *,
    users_repo: UserRepository,
    settings_repo: SettingsRepository,
    members_repo: MemberRepository,
    events_repo: EventRepository,
    attendance_repo: AttendanceRepository,
    guests_repo: GuestRepository,
    insight_generator: Optional[TextGenerator],
) -> Container:
    return Container(
        users_repo=users_repo,
        settings_repo=settings_repo,
        members_repo=members_repo,
        events_repo=events_repo,
        attendance_repo=attendance_repo,
        guests_repo=guests_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        settings_service=SettingsService(settings_repo),
        member_service=MemberService(members_repo, attendance_repo),
        event_service=EventService(events_repo),
        attendance_service=AttendanceService(attendance_repo, members_repo, events_repo),
        guest_service=GuestService(guests_repo, events_repo),
        report_service=ReportService(members_repo, events_repo, attendance_repo),
        insight_service=InsightService(insight_generator or GeminiTextGenerator(None)),
    )


def build_container(*, db_config: dict, insight_generator: Optional[TextGenerator] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return _wire(
        users_repo=MySQLUserRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        members_repo=MySQLMemberRepository(conn),
        events_repo=MySQLEventRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        guests_repo=MySQLGuestRepository(conn),
        insight_generator=insight_generator,
    )


def build_memory_container(*, seed: bool = True, insight_generator: Optional[TextGenerator] = None) -> Container:
    """In-process store. Non-durable; optionally seeded with the demo data set."""
    container = _wire(
        users_repo=InMemoryUserRepository(),
        settings_repo=InMemorySettingsRepository(),
        members_repo=InMemoryMemberRepository(demo_members() if seed else ()),
        events_repo=InMemoryEventRepository(demo_events() if seed else ()),
        attendance_repo=InMemoryAttendanceRepository(demo_attendance() if seed else ()),
        guests_repo=InMemoryGuestRepository(),
        insight_generator=insight_generator,
    )
    if seed:
        container.user_service.ensure_seed_users(DEMO_USERS)
    return container
