from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_SETTINGS


@dataclass(frozen=True)
class AppSettings:
    """Global display customization (one record for the whole install)."""

    church_name: str
    slogan: str
    logo: str
    theme: str

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        merged = {**DEFAULT_SETTINGS, **{k: v for k, v in data.items() if k in DEFAULT_SETTINGS}}
        return cls(
            church_name=str(merged["churchName"]),
            slogan=str(merged["slogan"]),
            logo=str(merged["logo"] or ""),
            theme=str(merged["theme"]),
        )

    def to_dict(self) -> dict:
        return {"churchName": self.church_name, "slogan": self.slogan, "logo": self.logo, "theme": self.theme}
