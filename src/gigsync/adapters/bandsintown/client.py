"""HTTP adapter for the Bandsintown artist events API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

from gigsync.adapters.base import SourceAdapter, SourceAPIError
from gigsync.adapters.http_resilience import ClientFactory, default_client_factory
from gigsync.config.bandsintown import BandsintownConfig, get_bandsintown_config
from gigsync.domain.model import Provider

from .schema import EventsAdapter
from .translator import parse_event

if TYPE_CHECKING:
    from gigsync.adapters.http_resilience import ResilientClient
    from gigsync.domain.model import EventRecord

    from .schema import EventPayload

log = getLogger(__name__)


@dataclass(slots=True)
class BandsintownAdapter(SourceAdapter):
    """All (past and upcoming) events Bandsintown lists for the configured artist."""

    provider = Provider.BANDSINTOWN

    config: BandsintownConfig | None = None
    client_factory: ClientFactory = field(default=default_client_factory)

    async def _fetch(self) -> list[EventRecord]:
        config = self.config or get_bandsintown_config()
        async with self.client_factory(config.resilience) as client:
            events = await self._request_events(client=client, config=config)
        return [parse_event(event, artist=config.artist) for event in events]

    async def _request_events(
        self,
        *,
        client: ResilientClient,
        config: BandsintownConfig,
    ) -> list[EventPayload]:
        path = f"artists/{quote(config.artist, safe='')}/events"
        response = await client.get(path, params={"app_id": config.app_id, "date": "all"})
        response.raise_for_status()

        payload = response.json()
        if isinstance(payload, dict) and "errorMessage" in payload:
            raise SourceAPIError(f"Bandsintown API error: {payload['errorMessage']}")
        if not isinstance(payload, list):
            raise SourceAPIError("Unexpected Bandsintown response payload")

        log.debug("Bandsintown returned %d events for %s", len(payload), config.artist)
        return EventsAdapter.validate_python(payload)
