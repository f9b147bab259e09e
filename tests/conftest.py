from __future__ import annotations

import pytest

_SOURCE_ENV_VARS = (
    "GIGSYNC_ARTIST",
    "GIGSYNC_SOURCES",
    "GIGSYNC_OUTPUT_DIR",
    "GIGSYNC_LOG_LEVEL",
    "EVENTBRITE_TOKEN",
    "EVENTBRITE_ORG_ID",
    "BANDSINTOWN_APP_ID",
    "SKIDDLE_API_KEY",
    "TICKETMASTER_API_KEY",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials from leaking into tests."""

    for name in _SOURCE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
