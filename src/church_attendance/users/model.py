from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Operator account.

    Note: Plain data object; ``password_hash`` never leaves the service layer.
    """

    user_id: str
    name: str
    username: str
    password_hash: str
    role: Role
