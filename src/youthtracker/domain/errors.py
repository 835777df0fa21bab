"""Error taxonomy for sweep runs.

Exceptions are reserved for conditions that stop (or pause) a run:

- ``FatalSweepError`` aborts the run before any store mutation
  (``ParseError``, ``StoreError``, ``UpstreamError``).
- ``RetryableSweepError`` is transient (``RateLimitError``). The HTTP
  transport retries it; one that still surfaces ends the run.

Item- and record-scoped failures never raise; they are reported as
``ItemRejected`` / ``RecordDropped`` values by the delta validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from youthtracker.domain.model import IssueKind

T = TypeVar("T")


class SweepError(RuntimeError):
    """Root of every exception raised by a sweep run."""


class FatalSweepError(SweepError):
    """Unrecoverable failure; the run stops without merging anything."""


class RetryableSweepError(SweepError):
    """Transient failure that may succeed when retried."""


class ParseError(FatalSweepError):
    """Raised when upstream output does not contain a usable delta object."""

    def __init__(self, message: str, *, raw_text: str) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class StoreError(FatalSweepError):
    """Raised when a durable store cannot be read, backed up or written."""


class UpstreamError(FatalSweepError):
    """Raised when the upstream producer fails for a non-transient reason."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(RetryableSweepError):
    """Raised when the upstream producer is still rate limited after every retry."""

    def __init__(self, message: str, *, retry_after: float | None = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after


@dataclass(frozen=True, slots=True)
class ItemRejected(Generic[T]):
    """A candidate item refused in full, with every reason collected for it."""

    item: T
    reasons: tuple[str, ...]

    @property
    def reason(self) -> str:
        return "; ".join(self.reasons)


@dataclass(frozen=True, slots=True)
class RecordDropped(Generic[T]):
    """A side-channel record silently filtered out of the delta."""

    record: T
    kind: IssueKind
    reason: str
