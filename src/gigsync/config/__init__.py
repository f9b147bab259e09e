"""Application configuration helpers."""

from __future__ import annotations

from .bandsintown import BandsintownConfig, get_bandsintown_config
from .catalog import (
    DEFAULT_SOURCE_ORDER,
    CatalogConfig,
    get_catalog_config,
    parse_source_order,
)
from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .eventbrite import EventbriteConfig, get_eventbrite_config
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, get_log_level
from .skiddle import SkiddleConfig, get_skiddle_config
from .ticketmaster import TicketmasterConfig, get_ticketmaster_config

__all__ = [
    "DEFAULT_SOURCE_ORDER",
    "BandsintownConfig",
    "CatalogConfig",
    "ConfigurationError",
    "EventbriteConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SkiddleConfig",
    "TicketmasterConfig",
    "configure_logging",
    "get_bandsintown_config",
    "get_catalog_config",
    "get_eventbrite_config",
    "get_log_level",
    "get_skiddle_config",
    "get_ticketmaster_config",
    "optional_env_var",
    "parse_source_order",
    "require_env_var",
    "require_env_vars",
]
