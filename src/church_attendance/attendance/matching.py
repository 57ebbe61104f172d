from __future__ import annotations

import re
from typing import Iterable, Optional

from ..members.model import Member

_NON_DIGITS = re.compile(r"\D")


def digits_only(value: Optional[str]) -> str:
    return _NON_DIGITS.sub("", value or "")


def find_member_by_identifier(members: Iterable[Member], identifier: str) -> Optional[Member]:
    """Match self check-in input against phone digits, email or "first last".

    Input is lower-cased and trimmed. Phone only matches when the input
    contains digits, so a blank phone never matches a blank input.
    """
    needle = (identifier or "").strip().lower()
    if not needle:
        return None
    needle_digits = digits_only(needle)

    for member in members:
        if needle_digits and digits_only(member.phone) == needle_digits:
            return member
        if member.email and member.email.lower() == needle:
            return member
        if member.full_name.lower() == needle:
            return member
    return None
