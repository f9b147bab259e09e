"""Bandsintown configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import USER_AGENT
from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

BANDSINTOWN_BASE_URL = "https://rest.bandsintown.com/"
BANDSINTOWN_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True, slots=True)
class BandsintownConfig:
    """Holds Bandsintown API configuration values."""

    app_id: str
    artist: str
    resilience: ResilienceConfig


def get_bandsintown_config(*, resilience: ResilienceConfig | None = None) -> BandsintownConfig:
    values = require_env_vars(("BANDSINTOWN_APP_ID", "GIGSYNC_ARTIST"))
    return BandsintownConfig(
        app_id=values["BANDSINTOWN_APP_ID"],
        artist=values["GIGSYNC_ARTIST"],
        resilience=resilience
        or ResilienceConfig(
            name="bandsintown",
            base_url=BANDSINTOWN_BASE_URL,
            timeout_seconds=BANDSINTOWN_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=2, per_seconds=1.0),
            default_headers={"User-Agent": USER_AGENT},
        ),
    )
