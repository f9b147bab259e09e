from __future__ import annotations

import asyncio

import httpx
from httpx_retries import Retry

from gigsync.adapters.http_resilience import ResilientClient, build_limiter, build_retry
from gigsync.config import RateLimit, ResilienceConfig, RetryPolicy
from tests.support.http import make_client_factory


def test_build_retry_copies_policy() -> None:
    retry = build_retry(RetryPolicy(total=2, status_forcelist=frozenset({503})))

    assert isinstance(retry, Retry)
    assert retry.total == 2


def test_build_limiter_is_optional() -> None:
    assert build_limiter(None) is None
    limiter = build_limiter(RateLimit(max_calls=5, per_seconds=1.0))
    assert limiter is not None
    assert limiter.max_rate == 5


def test_client_sends_default_headers_relative_to_base_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    config = ResilienceConfig(
        name="example",
        base_url="https://api.example.com/v1/",
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={"User-Agent": "gigsync-tests"},
    )
    factory = make_client_factory(handler)

    async def run() -> httpx.Response:
        client: ResilientClient = factory(config)
        async with client:
            return await client.get("events", params={"page": 1})

    response = asyncio.run(run())

    assert response.json() == {"ok": True}
    assert str(seen[0].url) == "https://api.example.com/v1/events?page=1"
    assert seen[0].headers["User-Agent"] == "gigsync-tests"


def test_client_uses_injected_transport_and_closes_it() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    config = ResilienceConfig(name="example", base_url="https://api.example.com/")
    client = ResilientClient(config, transport=httpx.MockTransport(handler))

    async def run() -> httpx.Response:
        async with client:
            return await client.get("ping")

    response = asyncio.run(run())

    assert response.status_code == 204
    assert [str(request.url) for request in seen] == ["https://api.example.com/ping"]
    assert client._client.is_closed  # noqa: SLF001  # type: ignore[reportPrivateUsage]
