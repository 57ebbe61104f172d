from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from ..core.constants import DEFAULT_PAGE_SIZE

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    total_pages: int
    total: int

    def to_dict(self, item_to_dict: Callable[[T], dict]) -> dict:
        return {
            "items": [item_to_dict(i) for i in self.items],
            "page": self.page,
            "totalPages": self.total_pages,
            "total": self.total,
        }


def total_pages(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    return math.ceil(total / page_size) if total else 0


def paginate(items: Sequence[T], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """1-indexed fixed-size pages. Out-of-range pages are clamped."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    pages = total_pages(len(items), page_size)
    page = min(max(1, int(page)), max(1, pages))
    start = (page - 1) * page_size
    return Page(items=list(items[start : start + page_size]), page=page, total_pages=pages, total=len(items))
