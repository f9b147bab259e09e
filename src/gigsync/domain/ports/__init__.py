"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import EventSource
from .publishing import CatalogWriter

__all__ = [
    "CatalogWriter",
    "EventSource",
]
