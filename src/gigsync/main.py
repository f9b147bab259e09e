#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import sys
from logging import getLogger
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from gigsync.app import build_event_catalog
from gigsync.config import configure_logging, get_log_level

if TYPE_CHECKING:
    from types import FrameType

log = getLogger(__name__)


def main() -> None:
    """Build and publish the event catalog; exits 1 on any failure."""

    load_dotenv()
    configure_logging(level=get_log_level())

    try:
        summary = build_event_catalog()
    except Exception as exc:  # noqa: BLE001
        log.exception("Event catalog build failed")
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Wrote {summary.total} events ({summary.upcoming} upcoming, {summary.past} past).")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(130)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
