from __future__ import annotations

import json
import logging
from typing import Optional, Protocol, Sequence

import requests

from ..attendance.model import AttendanceRecord
from ..events.model import Event
from ..members.model import Member

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Gemini API Key is missing. Please configure your environment."
EMPTY_INSIGHT_MESSAGE = "Could not generate insights."
ERROR_MESSAGE = "Error connecting to AI service."


class TextGenerator(Protocol):
    @property
    def configured(self) -> bool:
        raise NotImplementedError

    def generate(self, prompt: str) -> str:
        raise NotImplementedError


def build_data_summary(
    members: Sequence[Member], events: Sequence[Event], attendance: Sequence[AttendanceRecord]
) -> dict:
    """Aggregated, name-free summary sent to the text generator."""
    recent = sorted(events, key=lambda e: e.date)[-3:]
    return {
        "totalMembers": len(members),
        "activeMembers": sum(1 for m in members if m.is_active),
        "recentEvents": [
            {
                "name": e.name,
                "date": e.date.strftime("%Y-%m-%dT%H:%M:%S"),
                "attendanceCount": sum(1 for a in attendance if a.event_id == e.event_id),
            }
            for e in recent
        ],
    }


class InsightService:
    """Turns data summaries into short texts. Never raises for generator failures."""

    def __init__(self, generator: TextGenerator):
        self._generator = generator

    def ministry_insight(
        self, members: Sequence[Member], events: Sequence[Event], attendance: Sequence[AttendanceRecord]
    ) -> str:
        if not self._generator.configured:
            return MISSING_KEY_MESSAGE

        summary = build_data_summary(members, events, attendance)
        prompt = (
            "Analyze the following church attendance data summary:\n"
            f"{json.dumps(summary, indent=2)}\n\n"
            "Provide a short, encouraging, and strategic insight for the Pastor. "
            "Focus on trends (growth or decline) and suggest one actionable step to improve engagement. "
            "Keep it under 100 words."
        )
        try:
            return self._generator.generate(prompt) or EMPTY_INSIGHT_MESSAGE
        except (requests.RequestException, ValueError, KeyError, IndexError):
            logger.exception("Insight generation failed")
            return ERROR_MESSAGE

    def event_description(self, name: str, event_type: str, date: str, location: Optional[str]) -> str:
        if not self._generator.configured:
            return ""
        prompt = (
            "Write a short, inviting, and warm description (max 2 sentences) for a church event.\n\n"
            f"Event Details:\nName: {name}\nType: {event_type}\nDate: {date}\nLocation: {location or ''}\n\n"
            "The tone should be welcoming to both members and new guests."
        )
        try:
            return self._generator.generate(prompt)
        except (requests.RequestException, ValueError, KeyError, IndexError):
            logger.exception("Event description generation failed")
            return ""
