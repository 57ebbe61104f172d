from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    """Key-value store of JSON documents."""

    def get(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def put(self, key: str, value: dict) -> None:
        """Insert or replace the document stored under ``key``."""

        raise NotImplementedError
