"""HTTP adapter for the Skiddle events API."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from gigsync.adapters.base import SourceAdapter, SourceAPIError
from gigsync.adapters.http_resilience import ClientFactory, default_client_factory
from gigsync.config.skiddle import SkiddleConfig, get_skiddle_config
from gigsync.domain.model import Provider

from .schema import SearchResponse
from .translator import parse_event

if TYPE_CHECKING:
    from gigsync.domain.model import EventRecord

log = getLogger(__name__)


@dataclass(slots=True)
class SkiddleAdapter(SourceAdapter):
    """Keyword search for the artist across Skiddle listings."""

    provider = Provider.SKIDDLE

    config: SkiddleConfig | None = None
    client_factory: ClientFactory = field(default=default_client_factory)

    async def _fetch(self) -> list[EventRecord]:
        config = self.config or get_skiddle_config()
        params: dict[str, str | int] = {
            "api_key": config.api_key,
            "keyword": config.artist,
            "limit": config.page_size,
        }
        async with self.client_factory(config.resilience) as client:
            response = await client.get("events/search/", params=params)
            response.raise_for_status()
            payload = SearchResponse.model_validate(response.json())

        if payload.error:
            raise SourceAPIError(
                f"Skiddle API error {payload.error}: {payload.error_message or 'unknown'}"
            )
        if payload.total_count > len(payload.results):
            log.info(
                "Skiddle reported %d matches; kept the first %d",
                payload.total_count,
                len(payload.results),
            )
        return [parse_event(event) for event in payload.results]
