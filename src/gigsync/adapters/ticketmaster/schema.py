"""Pydantic models describing the Ticketmaster Discovery API event search payload."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class TicketmasterBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class StartPayload(TicketmasterBaseModel):
    local_date: str | None = Field(default=None, alias="localDate")
    local_time: str | None = Field(default=None, alias="localTime")
    date_time: str | None = Field(default=None, alias="dateTime")


class StatusPayload(TicketmasterBaseModel):
    code: str | None = None


class DatesPayload(TicketmasterBaseModel):
    start: StartPayload = Field(default_factory=StartPayload)
    status: StatusPayload | None = None


class NamedPayload(TicketmasterBaseModel):
    name: str | None = None


class CountryPayload(TicketmasterBaseModel):
    name: str | None = None
    country_code: str | None = Field(default=None, alias="countryCode")


class VenuePayload(TicketmasterBaseModel):
    name: str | None = None
    city: NamedPayload | None = None
    country: CountryPayload | None = None


class EventEmbedded(TicketmasterBaseModel):
    venues: list[VenuePayload] = Field(default_factory=list)
    attractions: list[NamedPayload] = Field(default_factory=list)


class EventPayload(TicketmasterBaseModel):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    dates: DatesPayload = Field(default_factory=DatesPayload)
    embedded: EventEmbedded = Field(default_factory=EventEmbedded, alias="_embedded")


class SearchEmbedded(TicketmasterBaseModel):
    events: list[EventPayload] = Field(default_factory=list)


class PagePayload(TicketmasterBaseModel):
    size: int = 0
    total_elements: int = Field(default=0, alias="totalElements")
    total_pages: int = Field(default=0, alias="totalPages")
    number: int = 0


class EventSearchResponse(TicketmasterBaseModel):
    embedded: SearchEmbedded = Field(default_factory=SearchEmbedded, alias="_embedded")
    page: PagePayload = Field(default_factory=PagePayload)


EventPayloadInput = EventPayload | Mapping[str, object]
