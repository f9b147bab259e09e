from __future__ import annotations

import asyncio

import httpx
import pytest

from gigsync.adapters.bandsintown import BandsintownAdapter, EventPayload, parse_event
from gigsync.config import BandsintownConfig, ResilienceConfig
from gigsync.domain.model import EventStatus, Ticket
from tests.support.http import make_client_factory

ARTIST = "Osiah"


@pytest.fixture
def config() -> BandsintownConfig:
    return BandsintownConfig(
        app_id="test-app",
        artist=ARTIST,
        resilience=ResilienceConfig(name="bandsintown", base_url="https://rest.bandsintown.com/"),
    )


@pytest.fixture
def sample_payload() -> dict[str, object]:
    return {
        "id": 104,
        "url": "https://www.bandsintown.com/e/104",
        "datetime": "2024-07-01T19:30:00",
        "title": "",
        "description": "Summer show",
        "venue": {"name": "The Garage", "city": "London", "country": "United Kingdom"},
        "offers": [
            {"type": "Tickets", "url": "https://tickets.example/104", "status": "Sold Out"},
        ],
        "lineup": ["Osiah", "Support Act"],
    }


def test_parse_event_maps_fields(sample_payload: dict[str, object]) -> None:
    record = parse_event(sample_payload, artist=ARTIST)

    assert record.date == "2024-07-01"
    assert record.time == "19:30"
    assert record.city == "London, United Kingdom"
    assert record.venue == "The Garage"
    assert record.title == "Summer show"
    assert record.supports == ("Support Act",)
    assert record.status is EventStatus.SOLD_OUT
    assert record.sources == ("bandsintown",)
    assert record.tickets == (Ticket("Bandsintown", "https://tickets.example/104"),)


def test_parse_event_falls_back_to_event_url(sample_payload: dict[str, object]) -> None:
    sample_payload["offers"] = None
    sample_payload["venue"] = {"name": "Roundhouse", "city": "London"}

    record = parse_event(EventPayload.model_validate(sample_payload), artist=ARTIST)

    assert record.status is EventStatus.ON_SALE
    assert record.city == "London"
    assert record.tickets == (Ticket("Bandsintown", "https://www.bandsintown.com/e/104"),)


def test_adapter_requests_all_dates(
    config: BandsintownConfig,
    sample_payload: dict[str, object],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[sample_payload])

    adapter = BandsintownAdapter(config=config, client_factory=make_client_factory(handler))

    records = asyncio.run(adapter.fetch_records())

    assert len(records) == 1
    assert adapter.name == "bandsintown"
    (request,) = seen
    assert request.url.path == "/artists/Osiah/events"
    assert request.url.params["app_id"] == "test-app"
    assert request.url.params["date"] == "all"


def test_adapter_returns_empty_on_api_error(config: BandsintownConfig) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"errorMessage": "[NotFound] The artist was not found"})

    adapter = BandsintownAdapter(config=config, client_factory=make_client_factory(handler))

    assert asyncio.run(adapter.fetch_records()) == []


def test_adapter_returns_empty_on_server_error(config: BandsintownConfig) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"message": "unavailable"})

    adapter = BandsintownAdapter(config=config, client_factory=make_client_factory(handler))

    assert asyncio.run(adapter.fetch_records()) == []


def test_adapter_returns_empty_on_malformed_payload(config: BandsintownConfig) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"venue": {"name": "No Date"}}])

    adapter = BandsintownAdapter(config=config, client_factory=make_client_factory(handler))

    assert asyncio.run(adapter.fetch_records()) == []


def test_adapter_returns_empty_when_unconfigured() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    adapter = BandsintownAdapter(client_factory=make_client_factory(handler))

    assert asyncio.run(adapter.fetch_records()) == []


def test_adapter_reads_environment(
    monkeypatch: pytest.MonkeyPatch,
    sample_payload: dict[str, object],
) -> None:
    monkeypatch.setenv("BANDSINTOWN_APP_ID", "env-app")
    monkeypatch.setenv("GIGSYNC_ARTIST", ARTIST)
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[sample_payload])

    adapter = BandsintownAdapter(client_factory=make_client_factory(handler))

    records = asyncio.run(adapter.fetch_records())

    assert [record.venue for record in records] == ["The Garage"]
    assert seen[0].url.params["app_id"] == "env-app"
    assert seen[0].headers["User-Agent"].startswith("gigsync/")
