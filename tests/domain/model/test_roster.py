from __future__ import annotations

import pytest

from tests.helpers.tracker import make_rumour
from youthtracker.domain.model import (
    ClubRegistry,
    DuplicatePlayerIdError,
    IntelStore,
    PlayerRecord,
    Roster,
    RumourLog,
)


def test_roster_rejects_duplicate_ids() -> None:
    players = [
        PlayerRecord(id=1, name="A", current_club="X"),
        PlayerRecord(id=1, name="B", current_club="Y"),
    ]

    with pytest.raises(DuplicatePlayerIdError):
        Roster(players=players)


def test_roster_lookup_requires_integer_ids(roster: Roster) -> None:
    assert roster.get(1) is not None
    assert roster.get("1") is None
    assert roster.get(True) is None
    assert 4 in roster
    assert 99 not in roster
    assert roster.rumour_count == 1


def test_rumour_log_is_newest_first() -> None:
    older = make_rumour(date="Jan 1, 2026")
    newer = make_rumour(date="Feb 1, 2026")
    log = RumourLog([older])

    log.prepend(newer)

    assert log.newest is newer
    assert list(log) == [newer, older]
    assert log[1] is older
    assert log[:1] == (newer,)


def test_rumour_log_iterates_a_snapshot() -> None:
    log = RumourLog([make_rumour()])

    for record in log:
        log.prepend(record)

    assert len(log) == 2


def test_empty_rumour_log_has_no_newest() -> None:
    assert RumourLog().newest is None


def test_intel_merge_reports_changed_fields() -> None:
    store = IntelStore()

    assert store.merge(5, {"contract": "2028"}) == ("contract",)
    assert store.merge(5, {"contract": "2028", "agent": "Z"}) == ("agent",)
    assert store.get(5) == {"contract": "2028", "agent": "Z"}
    assert store.entries.keys() == {"5"}


def test_registry_lookup_is_case_insensitive(registry: ClubRegistry) -> None:
    assert registry.canonical_for("sporting lisbon") == "Sporting CP"
    assert registry.canonical_for("SPORTING CP") == "Sporting CP"
    assert registry.canonical_for("Benfica") is None
    assert not registry.is_empty
    assert ClubRegistry.empty().is_empty
