from __future__ import annotations

from datetime import datetime

import pytest
import requests

from church_attendance.container import build_memory_container
from church_attendance.gateway.client import DataGateway
from church_attendance.gateway.mirror import MirrorStore
from church_attendance.main import create_app

TESTING_SETTINGS = "church_attendance.config.testing"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 20, 12, 0, 0)


@pytest.fixture
def container():
    """Memory container seeded with the demo data set."""
    return build_memory_container(seed=True)


@pytest.fixture
def empty_container():
    return build_memory_container(seed=False)


@pytest.fixture
def app(container):
    return create_app(TESTING_SETTINGS, container=container)


@pytest.fixture
def client(app):
    return app.test_client()


class UnreachableSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError(f"{method} {url}: connection refused")


@pytest.fixture
def offline_gateway():
    """Gateway whose API is down, so every call lands in a fresh mirror."""
    return DataGateway("http://church.invalid/api", session=UnreachableSession(), mirror=MirrorStore(latency=0))
