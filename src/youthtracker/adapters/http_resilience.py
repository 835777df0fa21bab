"""Rate-limited ``httpx`` client whose transport retries rate-limited calls."""

from __future__ import annotations

from copy import copy
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter
from httpx_retries import Retry, RetryTransport

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, TimeoutTypes, URLTypes

    from youthtracker.config.http_resilience import ResilienceConfig, RetryPolicy

log = getLogger(__name__)


class PostOptions(TypedDict, total=False):
    json: object
    headers: HeaderTypes


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    transport: httpx.AsyncBaseTransport


class LinearRetry(Retry):
    """``Retry`` that waits ``step_seconds`` times the attempt number."""

    def __init__(self, *, step_seconds: float, **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self.step_seconds = step_seconds

    def increment(self) -> LinearRetry:
        retry = copy(self)
        retry.attempts_made = self.attempts_made + 1
        return retry

    def backoff_strategy(self) -> float:
        delay = self.step_seconds * self.attempts_made
        log.warning(
            "Rate limited; retry %s/%s in %.0fs", self.attempts_made, self.total, delay
        )
        return delay


def build_retry(policy: RetryPolicy) -> LinearRetry:
    return LinearRetry(
        step_seconds=policy.step_seconds,
        total=policy.total,
        max_backoff_wait=max(policy.schedule, default=0.0),
        backoff_jitter=0.0,
        respect_retry_after_header=False,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=(),
    )


class ResilientClient:
    """Posts through an ``AsyncLimiter`` and, when configured, a ``RetryTransport``.

    Once the retries are spent the last response is returned as is, so the
    caller still sees the final rate-limit status.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )

        if config.retry is not None:
            transport = RetryTransport(transport=transport, retry=build_retry(config.retry))

        client_kwargs: AsyncClientOptions = {"timeout": config.timeout_seconds}
        if transport is not None:
            client_kwargs["transport"] = transport
        if config.base_url is not None:
            client_kwargs["base_url"] = config.base_url
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self._client.aclose()

    async def post(self, url: URLTypes, **kwargs: Unpack[PostOptions]) -> httpx.Response:
        if self._limiter is None:
            return await self._client.post(url, **kwargs)
        async with self._limiter:
            return await self._client.post(url, **kwargs)
