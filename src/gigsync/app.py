"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from itertools import chain
from logging import getLogger
from typing import TYPE_CHECKING

from gigsync.adapters.json_output import JsonCatalogWriter
from gigsync.adapters.registry import build_sources
from gigsync.config import get_catalog_config
from gigsync.domain.calendar import today_iso, utcnow
from gigsync.domain.reconciliation import reconcile

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gigsync.domain.calendar import Clock
    from gigsync.domain.model import EventRecord
    from gigsync.domain.ports import CatalogWriter, EventSource


log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CatalogSummary:
    """Outcome of one catalog build."""

    total: int
    upcoming: int
    past: int


async def _collect_records_async(sources: Sequence[EventSource]) -> list[EventRecord]:
    batches = await asyncio.gather(*(source.fetch_records() for source in sources))
    return list(chain.from_iterable(batches))


def collect_records(sources: Sequence[EventSource]) -> list[EventRecord]:
    """Run every source concurrently and concatenate results in ``sources`` order."""

    return asyncio.run(_collect_records_async(sources))


def build_event_catalog(
    *,
    sources: Sequence[EventSource] | None = None,
    writer: CatalogWriter | None = None,
    clock: Clock = utcnow,
) -> CatalogSummary:
    """Fetch listings from all sources, reconcile them and publish the catalog."""

    if sources is None or writer is None:
        config = get_catalog_config()
        sources = sources if sources is not None else build_sources(config.source_order)
        writer = writer or JsonCatalogWriter(config.output_dir)

    today = today_iso(clock=clock)
    log.info(
        "Building event catalog: sources=%s, today=%s",
        ",".join(source.name for source in sources),
        today,
    )

    records = collect_records(sources)
    catalog = reconcile(records, today=today)
    writer.write(catalog)

    summary = CatalogSummary(
        total=len(catalog.events),
        upcoming=len(catalog.upcoming),
        past=len(catalog.past),
    )
    log.info(
        "Finished event catalog: total=%s, upcoming=%s, past=%s",
        summary.total,
        summary.upcoming,
        summary.past,
    )
    return summary
