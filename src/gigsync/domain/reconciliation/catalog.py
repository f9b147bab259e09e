"""Cluster, identify, order and partition event records into a catalog.

Clustering is a greedy first-match fold: records are visited in input order and
each joins the first open cluster whose head it matches, otherwise it opens a
new cluster. Because matching is not transitive the result depends on input
order; for a fixed order it is deterministic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .match import same_event
from .merge import merge_records
from .normalize import slug

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from gigsync.domain.model import EventRecord

type RecordMatcher = Callable[[EventRecord, EventRecord], bool]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EventCatalog:
    """Reconciled events for one run, split around ``today`` (inclusive upcoming)."""

    events: tuple[EventRecord, ...]
    upcoming: tuple[EventRecord, ...]
    past: tuple[EventRecord, ...]
    today: str


def cluster_records(
    records: Iterable[EventRecord],
    *,
    matcher: RecordMatcher = same_event,
) -> list[EventRecord]:
    """Fold ``records`` into cluster heads, first match wins.

    Each head is replaced by a new merged record on absorption; heads are never
    split or reassigned afterwards.
    """

    heads: list[EventRecord] = []
    for record in records:
        for index, head in enumerate(heads):
            if matcher(head, record):
                heads[index] = merge_records(head, record)
                log.debug(
                    "Merged %s listing into cluster %d (%s, %s, %s)",
                    "/".join(record.sources) or "unknown",
                    index,
                    head.date,
                    head.city,
                    head.venue,
                )
                break
        else:
            heads.append(record)
    return heads


def event_identifier(record: EventRecord) -> str:
    """``<date>-<city slug>-<venue slug>``, stable while city and venue text are."""

    return f"{record.date}-{slug(record.city)}-{slug(record.venue)}"


def build_catalog(records: Sequence[EventRecord]) -> list[EventRecord]:
    """Merge duplicate listings and return canonical events in ascending date order."""

    clusters = cluster_records(records)
    identified = [replace(event, id=event_identifier(event)) for event in clusters]
    log.info("Reconciled %d listings into %d events", len(records), len(identified))
    return sorted(identified, key=lambda event: event.date)


def partition_catalog(
    events: Sequence[EventRecord],
    *,
    today: str,
) -> tuple[list[EventRecord], list[EventRecord]]:
    """Split date-sorted events into upcoming (ascending) and past (descending).

    An event dated ``today`` is upcoming. Dates compare as ISO strings, which is
    chronological order.
    """

    upcoming = [event for event in events if event.date >= today]
    past = [event for event in events if event.date < today]
    past.reverse()
    return upcoming, past


def reconcile(records: Sequence[EventRecord], *, today: str) -> EventCatalog:
    """Build the full catalog for one run."""

    events = build_catalog(records)
    upcoming, past = partition_catalog(events, today=today)
    return EventCatalog(
        events=tuple(events),
        upcoming=tuple(upcoming),
        past=tuple(past),
        today=today,
    )


__all__ = [
    "EventCatalog",
    "RecordMatcher",
    "build_catalog",
    "cluster_records",
    "event_identifier",
    "partition_catalog",
    "reconcile",
]
