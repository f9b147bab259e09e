"""Public interface for the Bandsintown adapter."""

from __future__ import annotations

from .client import BandsintownAdapter
from .schema import EventPayload, EventPayloadInput
from .translator import parse_event

__all__ = [
    "BandsintownAdapter",
    "EventPayload",
    "EventPayloadInput",
    "parse_event",
]
