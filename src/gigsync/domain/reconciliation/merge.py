"""Fold a matched record into the record representing its cluster."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from gigsync.domain.model import EventStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gigsync.domain.model import EventRecord, Ticket


def merge_status(left: EventStatus, right: EventStatus) -> EventStatus:
    """The more severe of two statuses (``tba < on_sale < sold_out < cancelled``)."""

    return max(left, right, key=lambda status: status.severity)


def merge_tickets(primary: Iterable[Ticket], secondary: Iterable[Ticket]) -> tuple[Ticket, ...]:
    """Union of ticket links keyed by ``(label, url)``, primary's links first."""

    seen: set[tuple[str, str]] = set()
    merged: list[Ticket] = []
    for group in (primary, secondary):
        for ticket in group:
            key = (ticket.label, ticket.url)
            if key in seen:
                continue
            seen.add(key)
            merged.append(ticket)
    return tuple(merged)


def _union(primary: Iterable[str], secondary: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys((*primary, *secondary)))


def merge_sources(primary: Iterable[str], secondary: Iterable[str]) -> tuple[str, ...]:
    """Set union of contributing adapters, in first-seen order."""

    return _union(primary, secondary)


def merge_supports(primary: Iterable[str], secondary: Iterable[str]) -> tuple[str, ...]:
    return _union(primary, secondary)


def merge_records(primary: EventRecord, secondary: EventRecord) -> EventRecord:
    """Combine a cluster head with a newly matched record.

    ``date``, ``city`` and ``venue`` stay as the head has them. Optional scalars
    fall back to the secondary record only when the head has none.
    Not commutative: callers always pass the accumulated head first.
    """

    return replace(
        primary,
        time=primary.time or secondary.time,
        title=primary.title or secondary.title or None,
        supports=merge_supports(primary.supports, secondary.supports),
        status=merge_status(primary.status, secondary.status),
        sources=merge_sources(primary.sources, secondary.sources),
        tickets=merge_tickets(primary.tickets, secondary.tickets),
        id=primary.id or secondary.id,
    )


__all__ = [
    "merge_records",
    "merge_sources",
    "merge_status",
    "merge_supports",
    "merge_tickets",
]
