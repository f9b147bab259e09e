"""HTTP adapter for the Ticketmaster Discovery API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from gigsync.adapters.base import SourceAdapter
from gigsync.adapters.http_resilience import ClientFactory, default_client_factory
from gigsync.config.ticketmaster import TicketmasterConfig, get_ticketmaster_config
from gigsync.domain.model import Provider

from .schema import EventSearchResponse
from .translator import parse_event

if TYPE_CHECKING:
    from gigsync.adapters.http_resilience import ResilientClient
    from gigsync.domain.model import EventRecord

log = getLogger(__name__)


@dataclass(slots=True)
class TicketmasterAdapter(SourceAdapter):
    """Keyword search for the artist across Ticketmaster's Discovery catalogue."""

    provider = Provider.TICKETMASTER

    config: TicketmasterConfig | None = None
    client_factory: ClientFactory = field(default=default_client_factory)

    async def _fetch(self) -> list[EventRecord]:
        config = self.config or get_ticketmaster_config()
        records: list[EventRecord] = []

        async with self.client_factory(config.resilience) as client:
            page_number = 0
            while page_number < config.max_pages:
                response = await self._request_page(
                    client=client, config=config, page_number=page_number
                )
                records.extend(
                    parse_event(event, artist=config.keyword)
                    for event in response.embedded.events
                )
                if page_number + 1 >= response.page.total_pages:
                    break
                page_number += 1
            else:
                log.warning("Stopped Ticketmaster pagination after %d pages", config.max_pages)

        return records

    async def _request_page(
        self,
        *,
        client: ResilientClient,
        config: TicketmasterConfig,
        page_number: int,
    ) -> EventSearchResponse:
        params: dict[str, str | int] = {
            "apikey": config.api_key,
            "keyword": config.keyword,
            "size": config.page_size,
            "page": page_number,
            "sort": "date,asc",
        }
        response = await client.get("events.json", params=params)
        response.raise_for_status()
        return EventSearchResponse.model_validate(response.json())
