"""Ports for publishing a reconciled catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gigsync.domain.reconciliation.catalog import EventCatalog


@runtime_checkable
class CatalogWriter(Protocol):
    """Persist a catalog; failures propagate and abort the run."""

    def write(self, catalog: EventCatalog) -> None: ...


__all__ = ["CatalogWriter"]
