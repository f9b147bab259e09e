from __future__ import annotations

import asyncio

import httpx
import pytest

from gigsync.adapters.skiddle import SkiddleAdapter, parse_event
from gigsync.config import ResilienceConfig, SkiddleConfig
from gigsync.domain.model import EventStatus, Ticket
from tests.support.http import make_client_factory


@pytest.fixture
def config() -> SkiddleConfig:
    return SkiddleConfig(
        api_key="skiddle-key",
        artist="Osiah",
        resilience=ResilienceConfig(name="skiddle", base_url="https://www.skiddle.com/api/v1/"),
    )


@pytest.fixture
def sample_payload() -> dict[str, object]:
    return {
        "id": "13712345",
        "eventname": "Osiah + Support",
        "date": "2024-07-01",
        "startdate": "2024-07-01T19:00:00+01:00",
        "venue": {"id": 77, "name": "Band on the Wall", "town": "Manchester", "country": "GB"},
        "link": "https://www.skiddle.com/whats-on/Manchester/Band-on-the-Wall/13712345/",
        "cancelled": "0",
        "openingtimes": {"doorsopen": "18:30", "doorsclose": "23:00"},
    }


def test_parse_event_maps_fields(sample_payload: dict[str, object]) -> None:
    record = parse_event(sample_payload)

    assert record.date == "2024-07-01"
    assert record.time == "18:30"
    assert record.city == "Manchester"
    assert record.venue == "Band on the Wall"
    assert record.title == "Osiah + Support"
    assert record.status is EventStatus.ON_SALE
    assert record.tickets == (
        Ticket(
            "Skiddle",
            "https://www.skiddle.com/whats-on/Manchester/Band-on-the-Wall/13712345/",
        ),
    )


def test_parse_event_falls_back_to_start_time(sample_payload: dict[str, object]) -> None:
    sample_payload["openingtimes"] = None

    assert parse_event(sample_payload).time == "19:00"


def test_parse_event_cancelled_flag_accepts_integers(sample_payload: dict[str, object]) -> None:
    sample_payload["cancelled"] = 1

    assert parse_event(sample_payload).status is EventStatus.CANCELLED


def test_parse_event_accepts_null_venue(sample_payload: dict[str, object]) -> None:
    sample_payload["venue"] = None

    record = parse_event(sample_payload)

    assert record.city == ""
    assert record.venue == ""
    assert record.date == "2024-07-01"


def test_adapter_searches_by_keyword(
    config: SkiddleConfig,
    sample_payload: dict[str, object],
) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"error": 0, "totalcount": "1", "pagecount": 1, "results": [sample_payload]},
        )

    adapter = SkiddleAdapter(config=config, client_factory=make_client_factory(handler))

    records = asyncio.run(adapter.fetch_records())

    assert [record.venue for record in records] == ["Band on the Wall"]
    (request,) = seen
    assert request.url.path == "/api/v1/events/search/"
    assert request.url.params["api_key"] == "skiddle-key"
    assert request.url.params["keyword"] == "Osiah"
    assert request.url.params["limit"] == "100"


def test_adapter_returns_empty_on_api_error(config: SkiddleConfig) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": 1, "errormessage": "Invalid API key"})

    adapter = SkiddleAdapter(config=config, client_factory=make_client_factory(handler))

    assert asyncio.run(adapter.fetch_records()) == []


def test_adapter_returns_empty_on_transport_error(config: SkiddleConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = SkiddleAdapter(config=config, client_factory=make_client_factory(handler))

    assert asyncio.run(adapter.fetch_records()) == []


def test_adapter_skips_without_artist(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKIDDLE_API_KEY", "skiddle-key")

    def handler(_: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    adapter = SkiddleAdapter(client_factory=make_client_factory(handler))

    assert asyncio.run(adapter.fetch_records()) == []
