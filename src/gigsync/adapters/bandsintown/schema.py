"""Pydantic models describing the Bandsintown artist events payload."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class BandsintownBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class VenuePayload(BandsintownBaseModel):
    name: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None

    _normalize_blanks = field_validator("name", "city", "region", "country", mode="before")(
        _blank_to_none
    )


class OfferPayload(BandsintownBaseModel):
    type: str | None = None
    url: str | None = None
    status: str | None = None


class EventPayload(BandsintownBaseModel):
    id: str | None = None
    url: str | None = None
    datetime: str
    title: str | None = None
    description: str | None = None
    venue: VenuePayload = Field(default_factory=VenuePayload)
    offers: list[OfferPayload] = Field(default_factory=list)
    lineup: list[str] = Field(default_factory=list)

    _normalize_blanks = field_validator("title", "description", "url", mode="before")(
        _blank_to_none
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value

    @field_validator("venue", mode="before")
    @classmethod
    def _null_venue(cls, value: object) -> object:
        return {} if value is None else value

    @field_validator("offers", "lineup", mode="before")
    @classmethod
    def _null_list(cls, value: object) -> object:
        return [] if value is None else value


EventsAdapter = TypeAdapter(list[EventPayload])

EventPayloadInput = EventPayload | Mapping[str, object]
