"""Configuration types for rate-limited, retrying HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retries of rate-limited calls on a linear schedule.

    With the defaults a call is attempted up to four times, waiting 60s,
    120s and 180s in between. Only the listed status codes are retried;
    transport errors never are.
    """

    total: int = 3
    step_seconds: float = 60.0
    allowed_methods: frozenset[str] = field(default_factory=lambda: frozenset({"POST"}))
    status_forcelist: frozenset[int] = field(default_factory=lambda: frozenset({429}))

    @property
    def schedule(self) -> tuple[float, ...]:
        return tuple(self.step_seconds * attempt for attempt in range(1, self.total + 1))


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy | None = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    default_headers: Mapping[str, str] | None = None
