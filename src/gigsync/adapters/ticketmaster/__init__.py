"""Public interface for the Ticketmaster adapter."""

from __future__ import annotations

from .client import TicketmasterAdapter
from .schema import EventPayload, EventPayloadInput, EventSearchResponse
from .translator import parse_event

__all__ = [
    "EventPayload",
    "EventPayloadInput",
    "EventSearchResponse",
    "TicketmasterAdapter",
    "parse_event",
]
