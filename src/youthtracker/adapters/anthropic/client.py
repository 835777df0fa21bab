"""HTTP client for the Anthropic Messages API."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from youthtracker.domain.errors import RateLimitError, UpstreamError

from .schema import ErrorResponse, MessagesResponse

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from youthtracker.adapters.http_resilience import ResilientClient
    from youthtracker.config.anthropic import AnthropicConfig

log = getLogger(__name__)

MESSAGES_PATH = "/v1/messages"
RATE_LIMIT_STATUS = 429


def _retry_after(response: httpx.Response) -> float | None:
    value = response.headers.get("retry-after")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _error_message(response: httpx.Response) -> str:
    try:
        payload = ErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return response.text[:200] or response.reason_phrase
    return f"{payload.error.type}: {payload.error.message}"


@dataclass(slots=True)
class MessagesClient:
    config: AnthropicConfig
    client: ResilientClient

    async def create(
        self,
        *,
        prompt: str,
        system: str | None = None,
        tools: Sequence[Mapping[str, object]] | None = None,
    ) -> MessagesResponse:
        body: dict[str, object] = {
            "model": self.config.model,
            "max_tokens": self.config.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system is not None:
            body["system"] = system
        if tools:
            body["tools"] = [dict(tool) for tool in tools]

        try:
            response = await self.client.post(MESSAGES_PATH, json=body)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Messages request failed: {exc}") from exc

        # a 429 here means the transport's retries are exhausted
        if response.status_code == RATE_LIMIT_STATUS:
            raise RateLimitError(_error_message(response), retry_after=_retry_after(response))
        if response.is_error:
            message = _error_message(response)
            log.error(f"Anthropic API error {response.status_code}: {message}")
            raise UpstreamError(message, status_code=response.status_code)

        try:
            return MessagesResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise UpstreamError(f"Unexpected Messages API payload: {exc}") from exc
