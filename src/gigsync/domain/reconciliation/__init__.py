"""Reconciliation core: turn per-source listings into one canonical catalog.

Flow for a single run:
1) normalize free-text fields into comparison keys
2) match records on exact date plus near-equal city and venue
3) fold matched records into cluster heads (first match wins)
4) assign identifiers, sort by date and split around today
"""

from __future__ import annotations

from .catalog import (
    EventCatalog,
    build_catalog,
    cluster_records,
    event_identifier,
    partition_catalog,
    reconcile,
)
from .match import MAX_EDIT_DISTANCE, edit_distance, fields_match, same_event
from .merge import merge_records, merge_sources, merge_status, merge_supports, merge_tickets
from .normalize import normalize, slug

__all__ = [
    "MAX_EDIT_DISTANCE",
    "EventCatalog",
    "build_catalog",
    "cluster_records",
    "edit_distance",
    "event_identifier",
    "fields_match",
    "merge_records",
    "merge_sources",
    "merge_status",
    "merge_supports",
    "merge_tickets",
    "normalize",
    "partition_catalog",
    "reconcile",
    "same_event",
    "slug",
]
