"""Pydantic models describing the Eventbrite events listing payload."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class EventbriteBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TextPayload(EventbriteBaseModel):
    text: str | None = None


class DateTimePayload(EventbriteBaseModel):
    timezone: str | None = None
    local: str | None = None
    utc: str | None = None


class AddressPayload(EventbriteBaseModel):
    city: str | None = None
    country: str | None = None


class VenuePayload(EventbriteBaseModel):
    name: str | None = None
    address: AddressPayload | None = None


class EventPayload(EventbriteBaseModel):
    id: str | None = None
    name: TextPayload | None = None
    url: str | None = None
    start: DateTimePayload
    status: str | None = None
    venue: VenuePayload | None = None


class PaginationPayload(EventbriteBaseModel):
    page_number: int = 1
    page_count: int = 1
    has_more_items: bool = False
    continuation: str | None = None


class EventsPage(EventbriteBaseModel):
    events: list[EventPayload] = Field(default_factory=list)
    pagination: PaginationPayload = Field(default_factory=PaginationPayload)


EventPayloadInput = EventPayload | Mapping[str, object]
