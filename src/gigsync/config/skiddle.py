"""Skiddle configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import USER_AGENT
from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

SKIDDLE_BASE_URL = "https://www.skiddle.com/api/v1/"
SKIDDLE_TIMEOUT_SECONDS = 15.0
SKIDDLE_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class SkiddleConfig:
    """Holds Skiddle API configuration values."""

    api_key: str
    artist: str
    resilience: ResilienceConfig
    page_size: int = SKIDDLE_PAGE_SIZE


def get_skiddle_config(*, resilience: ResilienceConfig | None = None) -> SkiddleConfig:
    values = require_env_vars(("SKIDDLE_API_KEY", "GIGSYNC_ARTIST"))
    return SkiddleConfig(
        api_key=values["SKIDDLE_API_KEY"],
        artist=values["GIGSYNC_ARTIST"],
        resilience=resilience
        or ResilienceConfig(
            name="skiddle",
            base_url=SKIDDLE_BASE_URL,
            timeout_seconds=SKIDDLE_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            default_headers={"User-Agent": USER_AGENT},
        ),
    )
