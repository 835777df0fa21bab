"""Ports for the upstream producer of candidate deltas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from youthtracker.domain.model import IntelStore, PlayerRecord, SweepType


@dataclass(frozen=True, slots=True, kw_only=True)
class SweepRequest:
    """Context handed to the producer for one run."""

    sweep_type: SweepType
    sweep_date: str
    sweep_number: int
    baseline_items: int
    intel: IntelStore


@runtime_checkable
class DeltaProducer(Protocol):
    """Async callable returning the raw (unparsed) candidate delta text."""

    async def __call__(
        self,
        players: Sequence[PlayerRecord],
        *,
        request: SweepRequest,
    ) -> str: ...


__all__ = ["DeltaProducer", "SweepRequest"]
