from __future__ import annotations

import copy
import threading
from typing import Optional

from .repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, initial: Optional[dict[str, dict]] = None):
        self._lock = threading.Lock()
        self._values: dict[str, dict] = copy.deepcopy(initial or {})

    def get(self, key: str) -> Optional[dict]:
        with self._lock:
            value = self._values.get(key)
            return dict(value) if value is not None else None

    def put(self, key: str, value: dict) -> None:
        with self._lock:
            self._values[key] = dict(value)
