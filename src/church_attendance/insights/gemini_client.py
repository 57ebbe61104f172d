from __future__ import annotations

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


class GeminiTextGenerator:
    """Minimal client for the Gemini ``generateContent`` REST endpoint.

    Treated as an opaque text generator: prompt in, text out.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        model: str = "gemini-2.5-flash",
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._model = model
        self._timeout = float(timeout)
        self._session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def generate(self, prompt: str) -> str:
        resp = self._session.post(
            GEMINI_URL.format(model=self._model),
            params={"key": self._api_key},
            json={"contents": [{"parts": [{"text": prompt}]}]},
            timeout=self._timeout,
        )
        resp.raise_for_status()
        payload = resp.json()
        parts = (payload.get("candidates") or [{}])[0].get("content", {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts).strip()
