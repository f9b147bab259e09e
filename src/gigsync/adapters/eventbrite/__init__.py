"""Public interface for the Eventbrite adapter."""

from __future__ import annotations

from .client import EventbriteAdapter
from .schema import EventPayload, EventPayloadInput, EventsPage
from .translator import parse_event

__all__ = [
    "EventPayload",
    "EventPayloadInput",
    "EventbriteAdapter",
    "EventsPage",
    "parse_event",
]
