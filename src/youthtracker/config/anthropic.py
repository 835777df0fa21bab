"""Anthropic Messages API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

ANTHROPIC_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_API_VERSION = "2023-06-01"
DEFAULT_SWEEP_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 8000
# search turns with web_search routinely take minutes
ANTHROPIC_TIMEOUT_SECONDS = 600.0


@dataclass(frozen=True, slots=True)
class AnthropicConfig:
    """Holds Anthropic API configuration values."""

    api_key: str
    model: str
    resilience: ResilienceConfig
    max_tokens: int = DEFAULT_MAX_TOKENS


def get_anthropic_config(*, resilience: ResilienceConfig | None = None) -> AnthropicConfig:
    values = require_env_vars(("ANTHROPIC_API_KEY",))
    api_key = values["ANTHROPIC_API_KEY"]
    return AnthropicConfig(
        api_key=api_key,
        model=optional_env_var("SWEEP_MODEL", DEFAULT_SWEEP_MODEL),
        resilience=resilience
        or ResilienceConfig(
            name="anthropic",
            base_url=ANTHROPIC_BASE_URL,
            timeout_seconds=ANTHROPIC_TIMEOUT_SECONDS,
            retry=RetryPolicy(),
            ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
            default_headers={
                "x-api-key": api_key,
                "anthropic-version": ANTHROPIC_API_VERSION,
                "content-type": "application/json",
            },
        ),
    )
