"""The roster aggregate and the per-player intel store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from youthtracker.domain.model.player import PlayerRecord


class DuplicatePlayerIdError(ValueError):
    """Raised when a roster holds two players with the same id."""

    def __init__(self, player_id: int) -> None:
        self.player_id = player_id
        super().__init__(f"Duplicate player id in roster: {player_id}")


@dataclass(slots=True, kw_only=True)
class RosterMeta:
    last_sweep: str | None = None
    sweep_number: int = 0
    extras: dict[str, object] = field(default_factory=dict["str", "object"], repr=False)


@dataclass(eq=False, kw_only=True)
class Roster:
    """Ordered collection of players plus run metadata."""

    players: list[PlayerRecord] = field(default_factory=list["PlayerRecord"])
    meta: RosterMeta = field(default_factory=RosterMeta)
    extras: dict[str, object] = field(default_factory=dict["str", "object"], repr=False)
    _by_id: dict[int, PlayerRecord] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {}
        for player in self.players:
            if player.id in self._by_id:
                raise DuplicatePlayerIdError(player.id)
            self._by_id[player.id] = player

    def get(self, player_id: object) -> PlayerRecord | None:
        # bool is an int subclass but never a valid id
        if isinstance(player_id, bool) or not isinstance(player_id, int):
            return None
        return self._by_id.get(player_id)

    def __contains__(self, player_id: object) -> bool:
        return self.get(player_id) is not None

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    @property
    def rumour_count(self) -> int:
        return sum(len(player.rumours) for player in self.players)


@dataclass(eq=False)
class IntelStore:
    """Free-form supplementary attributes keyed by player id.

    Entries are created lazily on first update and merged field by field.
    """

    entries: dict[str, dict[str, object]] = field(default_factory=dict["str", "dict[str, object]"])

    @staticmethod
    def key_for(player_id: int) -> str:
        return str(player_id)

    def get(self, player_id: int) -> dict[str, object] | None:
        return self.entries.get(self.key_for(player_id))

    def merge(self, player_id: int, updates: Mapping[str, object]) -> tuple[str, ...]:
        """Shallow-merge ``updates`` into the player's entry.

        Returns the names of the fields whose value actually changed.
        """

        key = self.key_for(player_id)
        entry = self.entries.setdefault(key, {})
        changed: list[str] = []
        for name, value in updates.items():
            if name not in entry or entry[name] != value:
                changed.append(name)
            entry[name] = value
        return tuple(changed)

    def __len__(self) -> int:
        return len(self.entries)
