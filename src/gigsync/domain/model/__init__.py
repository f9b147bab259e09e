"""Public domain model surface."""

from __future__ import annotations

from gigsync.domain.model.enums import EventStatus, Provider
from gigsync.domain.model.event import EventRecord, Ticket, source_record

__all__ = [
    "EventRecord",
    "EventStatus",
    "Provider",
    "Ticket",
    "source_record",
]
