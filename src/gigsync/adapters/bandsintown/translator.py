"""Translate Bandsintown payloads into event records."""

from __future__ import annotations

import re

from gigsync.domain.model import EventRecord, EventStatus, Provider, source_record
from gigsync.domain.reconciliation.normalize import normalize

from .schema import EventPayload, EventPayloadInput, OfferPayload, VenuePayload

_SOLD_OUT = re.compile(r"sold\s*out", re.IGNORECASE)


def parse_event(payload: EventPayloadInput, *, artist: str) -> EventRecord:
    """Build a record from one Bandsintown event; ``artist`` is left out of supports."""

    event = payload if isinstance(payload, EventPayload) else EventPayload.model_validate(payload)
    return source_record(
        Provider.BANDSINTOWN,
        date=event.datetime,
        time=event.datetime,
        city=_city_label(event.venue),
        venue=event.venue.name,
        title=event.title or event.description,
        supports=_supports(event.lineup, artist=artist),
        url=_ticket_url(event),
        status=_status(event.offers),
    )


def _city_label(venue: VenuePayload) -> str:
    city = venue.city or ""
    if venue.country:
        return f"{city}, {venue.country}"
    return city


def _ticket_url(event: EventPayload) -> str | None:
    if event.offers and event.offers[0].url:
        return event.offers[0].url
    return event.url


def _status(offers: list[OfferPayload]) -> EventStatus:
    if any(_SOLD_OUT.search(offer.status or "") for offer in offers):
        return EventStatus.SOLD_OUT
    return EventStatus.ON_SALE


def _supports(lineup: list[str], *, artist: str) -> list[str]:
    headliner = normalize(artist)
    return [name for name in lineup if normalize(name) != headliner]
