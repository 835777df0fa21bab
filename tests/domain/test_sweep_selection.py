from __future__ import annotations

import pytest

from youthtracker.domain.model import PlayerRecord, Roster, SweepType
from youthtracker.domain.sweep import NoMatchingPlayerError, batch_players, select_targets


def _players(count: int) -> list[PlayerRecord]:
    return [PlayerRecord(id=n, name=f"Player {n}", current_club="Club") for n in range(count)]


def test_full_sweep_targets_everyone(roster: Roster) -> None:
    assert [player.id for player in select_targets(roster, SweepType.FULL)] == [1, 2, 3, 4]


def test_priority_sweep_targets_tiers_a_and_b(roster: Roster) -> None:
    assert [player.id for player in select_targets(roster, SweepType.PRIORITY)] == [1, 2, 4]


def test_flash_sweep_matches_name_fragment(roster: Roster) -> None:
    targets = select_targets(roster, SweepType.FLASH, flash_player="DABO")

    assert [player.id for player in targets] == [2]


def test_flash_sweep_without_match_fails(roster: Roster) -> None:
    with pytest.raises(NoMatchingPlayerError, match='No player found matching "Zidane"'):
        select_targets(roster, SweepType.FLASH, flash_player="Zidane")


def test_full_sweeps_are_batched() -> None:
    batches = batch_players(_players(15), SweepType.FULL, batch_size=7)

    assert [len(batch) for batch in batches] == [7, 7, 1]
    assert batches[1][0].id == 7


@pytest.mark.parametrize(
    ("count", "sweep_type"),
    [(7, SweepType.FULL), (15, SweepType.PRIORITY), (9, SweepType.FLASH)],
)
def test_single_batch_cases(count: int, sweep_type: SweepType) -> None:
    assert len(batch_players(_players(count), sweep_type, batch_size=7)) == 1


def test_batch_size_must_be_positive() -> None:
    with pytest.raises(ValueError, match="positive"):
        batch_players(_players(3), SweepType.FULL, batch_size=0)
