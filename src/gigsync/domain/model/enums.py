"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Provider(StrEnum):
    EVENTBRITE = "eventbrite"
    BANDSINTOWN = "bandsintown"
    SKIDDLE = "skiddle"
    TICKETMASTER = "ticketmaster"

    @property
    def label(self) -> str:
        """Display name used as the ticket label for links from this provider."""

        return _PROVIDER_LABELS[self]


_PROVIDER_LABELS: dict[Provider, str] = {
    Provider.EVENTBRITE: "Eventbrite",
    Provider.BANDSINTOWN: "Bandsintown",
    Provider.SKIDDLE: "Skiddle",
    Provider.TICKETMASTER: "Ticketmaster",
}


class EventStatus(StrEnum):
    """Ticketing status, ordered by severity (``cancelled`` highest)."""

    TBA = "tba"
    ON_SALE = "on_sale"
    SOLD_OUT = "sold_out"
    CANCELLED = "cancelled"

    @property
    def severity(self) -> int:
        return _STATUS_SEVERITY[self]


_STATUS_SEVERITY: dict[EventStatus, int] = {
    EventStatus.TBA: 0,
    EventStatus.ON_SALE: 1,
    EventStatus.SOLD_OUT: 2,
    EventStatus.CANCELLED: 3,
}
