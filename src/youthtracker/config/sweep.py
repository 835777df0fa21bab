"""Sweep defaults: batching and search budgets."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BATCH_SIZE = 7
DEFAULT_SEARCHES_PER_PLAYER = 5
DEFAULT_MAX_SEARCHES = 50
DEFAULT_FLASH_SEARCHES = 15


@dataclass(frozen=True, slots=True)
class SweepConfig:
    batch_size: int = DEFAULT_BATCH_SIZE
    searches_per_player: int = DEFAULT_SEARCHES_PER_PLAYER
    max_searches: int = DEFAULT_MAX_SEARCHES
    flash_searches: int = DEFAULT_FLASH_SEARCHES


def get_sweep_config() -> SweepConfig:
    return SweepConfig()
