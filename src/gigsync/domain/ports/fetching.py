"""Ports for fetching event records from external sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gigsync.domain.model import EventRecord


@runtime_checkable
class EventSource(Protocol):
    """A source of event records that never fails its caller.

    Implementations return an empty list on any upstream problem (missing
    credentials, HTTP errors, malformed payloads) instead of raising.
    """

    @property
    def name(self) -> str: ...

    async def fetch_records(self) -> list[EventRecord]: ...


__all__ = ["EventSource"]
