"""Catalog run configuration: adapter order and output location."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from gigsync import __version__

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_SOURCE_ORDER: Final[tuple[str, ...]] = (
    "eventbrite",
    "bandsintown",
    "skiddle",
    "ticketmaster",
)
DEFAULT_OUTPUT_DIR: Final[str] = "web"
USER_AGENT: Final[str] = f"gigsync/{__version__}"


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Which adapters run, in what order, and where the catalog is written."""

    source_order: tuple[str, ...] = DEFAULT_SOURCE_ORDER
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)


def parse_source_order(value: str) -> tuple[str, ...]:
    """Parse a comma-separated adapter list, keeping the first occurrence of each name."""

    names: list[str] = []
    for raw in value.split(","):
        name = raw.strip().lower()
        if name and name not in names:
            names.append(name)
    unknown = [name for name in names if name not in DEFAULT_SOURCE_ORDER]
    if unknown:
        raise ConfigurationError(f"Unknown event sources: {', '.join(unknown)}")
    if not names:
        raise ConfigurationError("GIGSYNC_SOURCES must name at least one event source")
    return tuple(names)


def get_catalog_config() -> CatalogConfig:
    sources = optional_env_var("GIGSYNC_SOURCES")
    output_dir = optional_env_var("GIGSYNC_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
    return CatalogConfig(
        source_order=parse_source_order(sources) if sources else DEFAULT_SOURCE_ORDER,
        output_dir=Path(output_dir or DEFAULT_OUTPUT_DIR),
    )
