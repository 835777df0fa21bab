from __future__ import annotations

import asyncio
from collections.abc import Callable  # noqa: TC003

import httpx
import pytest

from youthtracker.adapters.http_resilience import ResilientClient, build_retry
from youthtracker.config import ResilienceConfig, RetryPolicy


class _Upstream:
    def __init__(self, statuses: list[int]) -> None:
        self.statuses = statuses
        self.calls = 0

    def __call__(self, _: httpx.Request) -> httpx.Response:
        self.calls += 1
        status = self.statuses.pop(0) if self.statuses else 200
        return httpx.Response(status, json={"status": status})


def _post(
    upstream: Callable[[httpx.Request], httpx.Response], *, retry: RetryPolicy | None
) -> httpx.Response:
    config = ResilienceConfig(name="test", base_url="https://upstream.test", retry=retry)

    async def run() -> httpx.Response:
        transport = httpx.MockTransport(upstream)
        async with ResilientClient(config, transport=transport) as client:
            return await client.post("/v1/messages", json={"hello": "world"})

    return asyncio.run(run())


def test_retry_waits_grow_linearly() -> None:
    retry = build_retry(RetryPolicy())
    delays: list[float] = []
    for _ in range(3):
        retry = retry.increment()
        delays.append(retry.backoff_strategy())

    assert delays == [60.0, 120.0, 180.0]
    assert RetryPolicy().schedule == (60.0, 120.0, 180.0)
    assert retry.is_exhausted()


def test_rate_limited_post_is_retried() -> None:
    upstream = _Upstream([429, 429, 429])

    response = _post(upstream, retry=RetryPolicy(step_seconds=0.0))

    assert response.status_code == 200
    assert upstream.calls == 4


def test_exhausted_retries_return_last_rate_limit() -> None:
    upstream = _Upstream([429] * 10)

    response = _post(upstream, retry=RetryPolicy(step_seconds=0.0))

    assert response.status_code == 429
    assert upstream.calls == 4


@pytest.mark.parametrize("status", [400, 500, 529])
def test_other_statuses_are_not_retried(status: int) -> None:
    upstream = _Upstream([status])

    response = _post(upstream, retry=RetryPolicy(step_seconds=0.0))

    assert response.status_code == status
    assert upstream.calls == 1


def test_transport_errors_are_not_retried() -> None:
    calls: list[httpx.Request] = []

    def upstream(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(httpx.ConnectError):
        _post(upstream, retry=RetryPolicy(step_seconds=0.0))

    assert len(calls) == 1


def test_no_retry_policy_sends_once() -> None:
    upstream = _Upstream([429])

    response = _post(upstream, retry=None)

    assert response.status_code == 429
    assert upstream.calls == 1
