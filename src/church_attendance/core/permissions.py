from __future__ import annotations

from enum import Enum

from .enums import Role


class Permission(str, Enum):
    VIEW_DASHBOARD = "view_dashboard"
    MANAGE_MEMBERS = "manage_members"
    MANAGE_EVENTS = "manage_events"
    MANAGE_GUESTS = "manage_guests"
    RUN_KIOSK = "run_kiosk"
    VIEW_REPORTS = "view_reports"
    MANAGE_SETTINGS = "manage_settings"


ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset(Permission),
    Role.SECRETARY: frozenset(
        {
            Permission.VIEW_DASHBOARD,
            Permission.MANAGE_MEMBERS,
            Permission.MANAGE_EVENTS,
            Permission.MANAGE_GUESTS,
            Permission.RUN_KIOSK,
            Permission.VIEW_REPORTS,
        }
    ),
    Role.VOLUNTEER: frozenset({Permission.RUN_KIOSK}),
}


def has_permission(role: Role, permission: Permission) -> bool:
    return permission in ROLE_PERMISSIONS.get(role, frozenset())
