"""Calendar helpers: ISO date truncation and the run's notion of "today"."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime
from typing import Protocol

_CLOCK_TIME = re.compile(r"^(\d{2}):(\d{2})")


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    return datetime.now(UTC)


def to_iso_date(value: str | date | datetime) -> str:
    """Return the ``YYYY-MM-DD`` date component of ``value``.

    Strings are truncated rather than converted: ``2024-07-01T23:30:00-05:00`` is
    ``2024-07-01`` even though it is already the 2nd in UTC.
    """

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    candidate = value.strip()[:10]
    try:
        return date.fromisoformat(candidate).isoformat()
    except ValueError as exc:
        raise ValueError(f"Invalid ISO date: {value!r}") from exc


def to_clock_time(value: str | None) -> str | None:
    """Return ``HH:MM`` from a clock time or an ISO timestamp, ``None`` if absent."""

    if value is None:
        return None
    text = value.strip()
    # Timestamps separate date and time with "T" or a single space.
    if len(text) > 10 and text[10] in "T ":
        text = text[11:]
    match = _CLOCK_TIME.match(text)
    if match is None:
        return None
    return f"{match.group(1)}:{match.group(2)}"


def today_iso(*, clock: Clock = utcnow) -> str:
    """ISO date of "now" in UTC; computed once per run by the caller."""

    now = clock()
    if now.tzinfo is not None:
        now = now.astimezone(UTC)
    return now.date().isoformat()


__all__ = ["Clock", "to_clock_time", "to_iso_date", "today_iso", "utcnow"]
