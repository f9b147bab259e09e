"""Translate Skiddle payloads into event records."""

from __future__ import annotations

from gigsync.domain.model import EventRecord, EventStatus, Provider, source_record

from .schema import EventPayload, EventPayloadInput


def parse_event(payload: EventPayloadInput) -> EventRecord:
    event = payload if isinstance(payload, EventPayload) else EventPayload.model_validate(payload)
    doors = event.opening_times.doors_open if event.opening_times is not None else None
    return source_record(
        Provider.SKIDDLE,
        date=event.date,
        time=doors or event.start_date,
        city=event.venue.town,
        venue=event.venue.name,
        title=event.event_name,
        url=event.link,
        status=EventStatus.CANCELLED if event.cancelled == "1" else EventStatus.ON_SALE,
    )
