"""Failure isolation shared by every event source adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

import httpx

from gigsync.config import ConfigurationError

if TYPE_CHECKING:
    from gigsync.domain.model import EventRecord, Provider

log = getLogger(__name__)


class SourceAPIError(RuntimeError):
    """Raised when a source answers with an application-level error or an unusable body."""


class SourceAdapter(ABC):
    """Base for adapters: subclasses implement ``_fetch`` and may raise freely.

    ``fetch_records`` converts every failure into an empty contribution so that
    one broken source degrades the catalog instead of aborting the run. Known
    upstream failures log a warning; anything else logs a traceback.
    """

    __slots__ = ()

    provider: ClassVar[Provider]

    @property
    def name(self) -> str:
        return str(self.provider)

    async def fetch_records(self) -> list[EventRecord]:
        try:
            records = await self._fetch()
        except ConfigurationError as exc:
            log.info("Skipping %s: %s", self.name, exc)
            return []
        except httpx.HTTPStatusError as exc:
            log.warning(
                "%s responded %s for %s",
                self.name,
                exc.response.status_code,
                exc.request.url.path,
            )
            return []
        except (httpx.HTTPError, SourceAPIError, ValueError) as exc:
            # ValueError covers pydantic validation, bad dates and non-JSON bodies.
            log.warning("Discarding %s results: %s: %s", self.name, type(exc).__name__, exc)
            return []
        except Exception:
            log.exception("Unexpected failure in %s; contributing no listings", self.name)
            return []
        log.info("Fetched %d listings from %s", len(records), self.name)
        return records

    @abstractmethod
    async def _fetch(self) -> list[EventRecord]: ...


__all__ = ["SourceAPIError", "SourceAdapter"]
