"""Event records as produced by source adapters and merged by reconciliation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gigsync.domain.calendar import to_clock_time, to_iso_date

from .enums import EventStatus, Provider

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date, datetime


@dataclass(frozen=True, slots=True)
class Ticket:
    """A purchase link; two tickets are the same link iff label and url agree."""

    label: str
    url: str


@dataclass(frozen=True, slots=True, kw_only=True)
class EventRecord:
    """One source's view of an event occurrence, or a merged canonical event.

    ``date`` is an ISO ``YYYY-MM-DD`` string and is never rewritten after the adapter
    produced it. ``sources``, ``supports`` and ``tickets`` keep first-seen order and
    hold no duplicates. ``id`` stays empty until the catalog assigns one.
    """

    date: str
    time: str | None = None
    city: str = ""
    venue: str = ""
    title: str | None = None
    supports: tuple[str, ...] = ()
    status: EventStatus = EventStatus.TBA
    sources: tuple[str, ...] = ()
    tickets: tuple[Ticket, ...] = ()
    id: str = ""


def source_record(
    provider: Provider,
    *,
    date: str | date | datetime,
    time: str | None = None,
    city: str | None = None,
    venue: str | None = None,
    title: str | None = None,
    supports: Iterable[str] = (),
    url: str | None = None,
    status: EventStatus = EventStatus.ON_SALE,
) -> EventRecord:
    """Build the record an adapter emits for a single upstream listing.

    Raises ``ValueError`` when ``date`` does not carry a valid calendar date.
    """

    return EventRecord(
        date=to_iso_date(date),
        time=to_clock_time(time),
        city=(city or "").strip(),
        venue=(venue or "").strip(),
        title=(title or "").strip() or None,
        supports=_unique(name.strip() for name in supports if name and name.strip()),
        status=status,
        sources=(str(provider),),
        tickets=(Ticket(label=provider.label, url=url),) if url else (),
    )


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))
