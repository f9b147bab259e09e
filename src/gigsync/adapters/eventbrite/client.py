"""HTTP adapter for the Eventbrite API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from gigsync.adapters.base import SourceAdapter
from gigsync.adapters.http_resilience import ClientFactory, default_client_factory
from gigsync.config.eventbrite import EventbriteConfig, get_eventbrite_config
from gigsync.domain.model import Provider

from .schema import EventsPage
from .translator import parse_event

if TYPE_CHECKING:
    from gigsync.adapters.http_resilience import ResilientClient
    from gigsync.domain.model import EventRecord

log = getLogger(__name__)

EVENT_STATUSES = "live,started,ended,canceled"


def events_path(config: EventbriteConfig) -> str:
    """Organization events when an organization is configured, else the token owner's."""

    if config.organization_id:
        return f"organizations/{config.organization_id}/events/"
    return "users/me/events/"


@dataclass(slots=True)
class EventbriteAdapter(SourceAdapter):
    """Events published on Eventbrite by the artist's own account or organization."""

    provider = Provider.EVENTBRITE

    config: EventbriteConfig | None = None
    client_factory: ClientFactory = field(default=default_client_factory)

    async def _fetch(self) -> list[EventRecord]:
        config = self.config or get_eventbrite_config()
        params: dict[str, str] = {"status": EVENT_STATUSES, "expand": "venue"}
        records: list[EventRecord] = []

        async with self.client_factory(config.resilience) as client:
            for _ in range(config.max_pages):
                page = await self._request_page(client=client, config=config, params=params)
                records.extend(parse_event(event) for event in page.events)

                pagination = page.pagination
                if not pagination.has_more_items or not pagination.continuation:
                    break
                params["continuation"] = pagination.continuation
            else:
                log.warning("Stopped Eventbrite pagination after %d pages", config.max_pages)

        return records

    async def _request_page(
        self,
        *,
        client: ResilientClient,
        config: EventbriteConfig,
        params: dict[str, str],
    ) -> EventsPage:
        response = await client.get(
            events_path(config),
            params=params,
            headers={"Authorization": f"Bearer {config.token}"},
        )
        response.raise_for_status()
        return EventsPage.model_validate(response.json())
