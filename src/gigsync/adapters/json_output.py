"""Write the reconciled catalog as three JSON documents."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, TypeAdapter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from gigsync.domain.model import EventRecord
    from gigsync.domain.reconciliation import EventCatalog

log = getLogger(__name__)

EVENTS_FILENAME = "events.json"
UPCOMING_FILENAME = "upcoming.json"
PAST_FILENAME = "past.json"


class TicketDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    url: str


class EventDocument(BaseModel):
    """Published shape of a canonical event; every key is always present."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: str
    time: str | None
    city: str
    venue: str
    title: str | None
    supports: list[str]
    status: str
    sources: list[str]
    tickets: list[TicketDocument]

    @classmethod
    def from_record(cls, record: EventRecord) -> EventDocument:
        return cls(
            id=record.id,
            date=record.date,
            time=record.time,
            city=record.city,
            venue=record.venue,
            title=record.title,
            supports=list(record.supports),
            status=str(record.status),
            sources=[str(source) for source in record.sources],
            tickets=[TicketDocument(label=t.label, url=t.url) for t in record.tickets],
        )


_DOCUMENTS = TypeAdapter(list[EventDocument])


def render_events(records: Iterable[EventRecord]) -> bytes:
    """Serialise records as an indented JSON array (absent optionals as ``null``)."""

    documents = [EventDocument.from_record(record) for record in records]
    return _DOCUMENTS.dump_json(documents, indent=2) + b"\n"


class JsonCatalogWriter:
    """Writes ``events.json``, ``upcoming.json`` and ``past.json`` into one directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def write(self, catalog: EventCatalog) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        for filename, events in (
            (EVENTS_FILENAME, catalog.events),
            (UPCOMING_FILENAME, catalog.upcoming),
            (PAST_FILENAME, catalog.past),
        ):
            path = self.output_dir / filename
            path.write_bytes(render_events(events))
            log.debug("Wrote %d events to %s", len(events), path)
