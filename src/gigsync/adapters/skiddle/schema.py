"""Pydantic models describing the Skiddle event search payload."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SkiddleBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class VenuePayload(SkiddleBaseModel):
    name: str | None = None
    town: str | None = None
    country: str | None = None


class OpeningTimesPayload(SkiddleBaseModel):
    doors_open: str | None = Field(default=None, alias="doorsopen")
    doors_close: str | None = Field(default=None, alias="doorsclose")


class EventPayload(SkiddleBaseModel):
    id: str | None = None
    event_name: str | None = Field(default=None, alias="eventname")
    date: str
    start_date: str | None = Field(default=None, alias="startdate")
    venue: VenuePayload = Field(default_factory=VenuePayload)
    link: str | None = None
    cancelled: str | None = None
    opening_times: OpeningTimesPayload | None = Field(default=None, alias="openingtimes")

    @field_validator("id", "cancelled", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> object:
        # Skiddle serialises flags and ids as either strings or integers.
        return str(value) if isinstance(value, int) else value

    @field_validator("venue", mode="before")
    @classmethod
    def _null_venue(cls, value: object) -> object:
        return {} if value is None else value


class SearchResponse(SkiddleBaseModel):
    error: int = 0
    error_message: str | None = Field(default=None, alias="errormessage")
    total_count: int = Field(default=0, alias="totalcount")
    results: list[EventPayload] = Field(default_factory=list)


EventPayloadInput = EventPayload | Mapping[str, object]
