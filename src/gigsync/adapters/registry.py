"""Map configured source names onto adapter instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gigsync.config import ConfigurationError
from gigsync.domain.model import Provider

from .bandsintown import BandsintownAdapter
from .eventbrite import EventbriteAdapter
from .skiddle import SkiddleAdapter
from .ticketmaster import TicketmasterAdapter

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from gigsync.domain.ports import EventSource

ADAPTERS: dict[Provider, Callable[[], EventSource]] = {
    Provider.EVENTBRITE: EventbriteAdapter,
    Provider.BANDSINTOWN: BandsintownAdapter,
    Provider.SKIDDLE: SkiddleAdapter,
    Provider.TICKETMASTER: TicketmasterAdapter,
}


def build_sources(order: Sequence[str]) -> list[EventSource]:
    """Instantiate one adapter per name, in the given order."""

    sources: list[EventSource] = []
    for name in order:
        try:
            provider = Provider(name)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown event source: {name}") from exc
        sources.append(ADAPTERS[provider]())
    return sources
