"""Eventbrite configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import USER_AGENT
from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

EVENTBRITE_BASE_URL = "https://www.eventbriteapi.com/v3/"
EVENTBRITE_TIMEOUT_SECONDS = 15.0
EVENTBRITE_MAX_PAGES = 5


@dataclass(frozen=True, slots=True)
class EventbriteConfig:
    """Holds Eventbrite API configuration values."""

    token: str
    resilience: ResilienceConfig
    organization_id: str | None = None
    max_pages: int = EVENTBRITE_MAX_PAGES


def get_eventbrite_config(*, resilience: ResilienceConfig | None = None) -> EventbriteConfig:
    values = require_env_vars(("EVENTBRITE_TOKEN",))
    return EventbriteConfig(
        token=values["EVENTBRITE_TOKEN"],
        organization_id=optional_env_var("EVENTBRITE_ORG_ID"),
        resilience=resilience
        or ResilienceConfig(
            name="eventbrite",
            base_url=EVENTBRITE_BASE_URL,
            timeout_seconds=EVENTBRITE_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            default_headers={"User-Agent": USER_AGENT},
        ),
    )
