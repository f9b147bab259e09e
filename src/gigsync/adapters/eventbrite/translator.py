"""Translate Eventbrite payloads into event records."""

from __future__ import annotations

from gigsync.domain.model import EventRecord, EventStatus, Provider, source_record

from .schema import EventPayload, EventPayloadInput


def parse_event(payload: EventPayloadInput) -> EventRecord:
    event = payload if isinstance(payload, EventPayload) else EventPayload.model_validate(payload)
    start = event.start.utc or event.start.local
    if start is None:
        raise ValueError(f"Eventbrite event {event.id} has no start time")

    venue = event.venue
    address = venue.address if venue is not None else None
    return source_record(
        Provider.EVENTBRITE,
        date=start,
        # Wall-clock time at the venue, not the UTC instant used for the date.
        time=event.start.local,
        city=address.city if address is not None else None,
        venue=venue.name if venue is not None else None,
        title=event.name.text if event.name is not None else None,
        url=event.url,
        status=EventStatus.CANCELLED if event.status == "canceled" else EventStatus.ON_SALE,
    )
