"""In-process stand-in for the HTTP API.

The mirror runs the real routes against an in-memory container seeded with
the demo data set, so a degraded client sees the same validation and error
codes as the live service. It is non-durable and private to the process.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..container import Container, build_memory_container
from ..core.constants import API_PREFIX, MIRROR_LATENCY_SECONDS
from ..main import build_api_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    status: int
    body: Any


class MirrorStore:
    def __init__(
        self,
        container: Optional[Container] = None,
        *,
        latency: float = MIRROR_LATENCY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.container = container or build_memory_container(seed=True)
        self._latency = float(latency)
        self._sleep = sleep
        self._client = build_api_app(self.container).test_client()

    def request(self, method: str, path: str, *, json: Any = None, params: Optional[dict] = None) -> Reply:
        if self._latency > 0:
            self._sleep(self._latency)
        resp = self._client.open(f"{API_PREFIX}{path}", method=method, json=json, query_string=params)
        logger.debug("mirror %s %s -> %s", method, path, resp.status_code)
        return Reply(status=resp.status_code, body=resp.get_json(silent=True))
