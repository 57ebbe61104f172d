from __future__ import annotations

import re
from enum import Enum
from typing import Optional, TypeVar

from ..core.constants import MEMBER_ID_LENGTH
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_MEMBER_ID_RE = re.compile(rf"^[A-Z0-9]{{{MEMBER_ID_LENGTH}}}$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Trim; empty strings become None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_member_id(value: Optional[str]) -> str:
    """Member ids are exactly six uppercase letters or digits."""
    if not value or not _MEMBER_ID_RE.match(value):
        raise ValidationError(f"Member ID must be {MEMBER_ID_LENGTH} uppercase letters or digits")
    return value


def is_valid_member_id(value: Optional[str]) -> bool:
    return bool(value and _MEMBER_ID_RE.match(value))


def require_choice(value: Optional[str], enum_cls: type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
