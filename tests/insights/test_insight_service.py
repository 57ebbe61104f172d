import requests

from church_attendance.insights.gemini_client import GeminiTextGenerator
from church_attendance.insights.service import (
    EMPTY_INSIGHT_MESSAGE,
    ERROR_MESSAGE,
    MISSING_KEY_MESSAGE,
    InsightService,
    build_data_summary,
)


class FakeGenerator:
    def __init__(self, reply="Keep going!", *, configured=True, error=None):
        self.configured = configured
        self._reply = reply
        self._error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self._error:
            raise self._error
        return self._reply


def _data(container):
    return (
        container.member_service.list_members(),
        container.event_service.list_events(),
        container.attendance_service.list_attendance(),
    )


def test_summary_has_no_member_names(container):
    summary = build_data_summary(*_data(container))

    assert summary["totalMembers"] == 12
    assert summary["activeMembers"] == 10
    assert [e["name"] for e in summary["recentEvents"]] == ["Sunday Service", "Bible Study", "Youth Camp"]
    assert "John" not in str(summary)


def test_insight_uses_generator(container):
    generator = FakeGenerator()

    assert InsightService(generator).ministry_insight(*_data(container)) == "Keep going!"
    assert '"totalMembers": 12' in generator.prompts[0]


def test_missing_key(container):
    service = InsightService(FakeGenerator(configured=False))

    assert service.ministry_insight(*_data(container)) == MISSING_KEY_MESSAGE
    assert service.event_description("Youth Night", "youth", "2024-05-17", None) == ""


def test_empty_reply(container):
    assert InsightService(FakeGenerator("")).ministry_insight(*_data(container)) == EMPTY_INSIGHT_MESSAGE


def test_generator_failure_is_not_raised(container):
    service = InsightService(FakeGenerator(error=requests.ConnectionError("down")))

    assert service.ministry_insight(*_data(container)) == ERROR_MESSAGE
    assert service.event_description("Youth Night", "youth", "2024-05-17", "Hall") == ""


class FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self._payload


class RecordingSession:
    def __init__(self, payload):
        self.payload = payload
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return FakeResponse(self.payload)


def test_gemini_client_joins_text_parts():
    session = RecordingSession({"candidates": [{"content": {"parts": [{"text": "Hello "}, {"text": "church"}]}}]})
    generator = GeminiTextGenerator("key-123", model="test-model", session=session)

    assert generator.configured
    assert generator.generate("prompt") == "Hello church"
    url, kwargs = session.calls[0]
    assert "test-model:generateContent" in url
    assert kwargs["params"] == {"key": "key-123"}


def test_gemini_client_without_key():
    assert not GeminiTextGenerator(None).configured
