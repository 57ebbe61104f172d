"""Member CSV import.

Positional columns: first, last, email, phone, ministry. The first row is a
header only when it mentions "email" (any case).
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ImportRow:
    first_name: str
    last_name: str
    email: Optional[str]
    phone: Optional[str]
    ministry: Optional[str]


def has_header(first_row: List[str]) -> bool:
    return "email" in ",".join(first_row).lower()


def _cell(row: List[str], index: int) -> Optional[str]:
    if index >= len(row):
        return None
    value = row[index].strip()
    return value or None


def parse_member_csv(text: str) -> tuple[list[ImportRow], int]:
    """Return parsed rows and the number of data rows skipped for missing names."""
    rows = [r for r in csv.reader(io.StringIO(text)) if any(c.strip() for c in r)]
    if rows and has_header(rows[0]):
        rows = rows[1:]

    parsed: list[ImportRow] = []
    skipped = 0
    for row in rows:
        first, last = _cell(row, 0), _cell(row, 1)
        if not first or not last:
            skipped += 1
            continue
        parsed.append(
            ImportRow(
                first_name=first,
                last_name=last,
                email=_cell(row, 2),
                phone=_cell(row, 3),
                ministry=_cell(row, 4),
            )
        )
    return parsed, skipped
