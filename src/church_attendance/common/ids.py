from __future__ import annotations

import secrets
import string
import uuid
from typing import Callable, Collection

from ..core.constants import MEMBER_ID_LENGTH

_MEMBER_ID_ALPHABET = string.ascii_uppercase + string.digits


def random_member_id() -> str:
    return "".join(secrets.choice(_MEMBER_ID_ALPHABET) for _ in range(MEMBER_ID_LENGTH))


def generate_member_id(taken: Collection[str] | Callable[[str], bool], *, attempts: int = 100) -> str:
    """Draw random ids until one is not taken.

    ``taken`` is either a collection of used ids or a predicate.
    """
    is_taken = taken if callable(taken) else taken.__contains__
    for _ in range(attempts):
        candidate = random_member_id()
        if not is_taken(candidate):
            return candidate
    raise RuntimeError("Could not generate a unique member id")


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
