"""Ticketmaster Discovery API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import USER_AGENT
from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

TICKETMASTER_BASE_URL = "https://app.ticketmaster.com/discovery/v2/"
TICKETMASTER_TIMEOUT_SECONDS = 15.0
TICKETMASTER_PAGE_SIZE = 100
TICKETMASTER_MAX_PAGES = 5


@dataclass(frozen=True, slots=True)
class TicketmasterConfig:
    """Holds Ticketmaster API configuration values."""

    api_key: str
    keyword: str
    resilience: ResilienceConfig
    page_size: int = TICKETMASTER_PAGE_SIZE
    max_pages: int = TICKETMASTER_MAX_PAGES


def get_ticketmaster_config(
    *, resilience: ResilienceConfig | None = None
) -> TicketmasterConfig:
    values = require_env_vars(("TICKETMASTER_API_KEY", "GIGSYNC_ARTIST"))
    return TicketmasterConfig(
        api_key=values["TICKETMASTER_API_KEY"],
        keyword=values["GIGSYNC_ARTIST"],
        resilience=resilience
        or ResilienceConfig(
            name="ticketmaster",
            base_url=TICKETMASTER_BASE_URL,
            timeout_seconds=TICKETMASTER_TIMEOUT_SECONDS,
            # Discovery API quota is 5 requests per second.
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            default_headers={"User-Agent": USER_AGENT},
        ),
    )
