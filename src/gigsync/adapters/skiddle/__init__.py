"""Public interface for the Skiddle adapter."""

from __future__ import annotations

from .client import SkiddleAdapter
from .schema import EventPayload, EventPayloadInput, SearchResponse
from .translator import parse_event

__all__ = [
    "EventPayload",
    "EventPayloadInput",
    "SearchResponse",
    "SkiddleAdapter",
    "parse_event",
]
