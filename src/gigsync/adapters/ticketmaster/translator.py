"""Translate Ticketmaster payloads into event records."""

from __future__ import annotations

from gigsync.domain.model import EventRecord, EventStatus, Provider, source_record
from gigsync.domain.reconciliation.normalize import normalize

from .schema import EventPayload, EventPayloadInput, VenuePayload


def parse_event(payload: EventPayloadInput, *, artist: str) -> EventRecord:
    event = payload if isinstance(payload, EventPayload) else EventPayload.model_validate(payload)
    start = event.dates.start
    date = start.date_time or start.local_date
    if date is None:
        raise ValueError(f"Ticketmaster event {event.id} has no start date")

    venue = event.embedded.venues[0] if event.embedded.venues else VenuePayload()
    status = event.dates.status.code if event.dates.status is not None else None
    headliner = normalize(artist)
    return source_record(
        Provider.TICKETMASTER,
        date=date,
        time=start.local_time,
        city=_city_label(venue),
        venue=venue.name,
        title=event.name,
        supports=[
            attraction.name
            for attraction in event.embedded.attractions
            if attraction.name and normalize(attraction.name) != headliner
        ],
        url=event.url,
        status=EventStatus.CANCELLED if status == "cancelled" else EventStatus.ON_SALE,
    )


def _city_label(venue: VenuePayload) -> str:
    city = (venue.city.name if venue.city is not None else None) or ""
    country_code = venue.country.country_code if venue.country is not None else None
    if country_code:
        return f"{city}, {country_code}"
    return city
