"""Selection and batching of the players a sweep searches."""

from __future__ import annotations

from typing import TYPE_CHECKING

from youthtracker.domain.errors import SweepError
from youthtracker.domain.model import SweepTier, SweepType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from youthtracker.domain.model import PlayerRecord, Roster

PRIORITY_TIERS = frozenset({SweepTier.A, SweepTier.B})


class NoMatchingPlayerError(SweepError):
    """Raised when a flash sweep names nobody on the roster."""


def select_targets(
    roster: Roster,
    sweep_type: SweepType,
    *,
    flash_player: str | None = None,
) -> list[PlayerRecord]:
    if sweep_type is SweepType.FLASH and flash_player:
        query = flash_player.lower()
        targets = [player for player in roster if query in player.name.lower()]
        if not targets:
            raise NoMatchingPlayerError(f'No player found matching "{flash_player}"')
        return targets
    if sweep_type is SweepType.PRIORITY:
        return [player for player in roster if player.sweep_tier in PRIORITY_TIERS]
    return list(roster)


def batch_players(
    players: Sequence[PlayerRecord],
    sweep_type: SweepType,
    *,
    batch_size: int,
) -> list[list[PlayerRecord]]:
    """Split full sweeps into groups of ``batch_size``; other sweeps run as one batch."""

    if batch_size < 1:
        raise ValueError("batch_size must be positive")
    if sweep_type is not SweepType.FULL or len(players) <= batch_size:
        return [list(players)]
    return [list(players[i : i + batch_size]) for i in range(0, len(players), batch_size)]
