from __future__ import annotations

from typing import Any, Mapping

from ..core.constants import DEFAULT_SETTINGS, SETTINGS_KEY
from .model import AppSettings
from .repository import SettingsRepository


class SettingsService:
    """Singleton settings stored as one JSON document under a well-known key.

    Updates merge into the stored document; fields not supplied keep their
    previous value. Unknown fields are ignored.
    """

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_settings(self) -> AppSettings:
        return AppSettings.from_dict(self._settings.get(SETTINGS_KEY) or {})

    def update_settings(self, changes: Mapping[str, Any]) -> AppSettings:
        stored = self._settings.get(SETTINGS_KEY) or {}
        accepted = {k: ("" if v is None else str(v)) for k, v in changes.items() if k in DEFAULT_SETTINGS}
        merged = {**stored, **accepted}
        self._settings.put(SETTINGS_KEY, merged)
        return AppSettings.from_dict(merged)
