"""Players and their rumour history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from youthtracker.domain.model.enums import SweepTier


@dataclass(frozen=True, slots=True, kw_only=True)
class RumourRecord:
    """One dated transfer claim. Immutable once stored."""

    date: str
    club: str
    detail: str
    source: str
    tier: int
    status: str
    recent: bool


class RumourLog:
    """Newest-first rumour history of one player.

    Records are only ever added at the front; there is no way to edit or
    reorder an entry in place.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[RumourRecord] = ()) -> None:
        self._records: list[RumourRecord] = list(records)

    def prepend(self, record: RumourRecord) -> None:
        self._records.insert(0, record)

    @property
    def newest(self) -> RumourRecord | None:
        return self._records[0] if self._records else None

    def __iter__(self) -> Iterator[RumourRecord]:
        return iter(tuple(self._records))

    def __len__(self) -> int:
        return len(self._records)

    @overload
    def __getitem__(self, index: int) -> RumourRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[RumourRecord, ...]: ...

    def __getitem__(self, index: int | slice) -> RumourRecord | tuple[RumourRecord, ...]:
        if isinstance(index, slice):
            return tuple(self._records[index])
        return self._records[index]

    def __repr__(self) -> str:
        return f"RumourLog({len(self._records)} records)"


@dataclass(eq=False, kw_only=True)
class PlayerRecord:
    """A tracked player. Created out-of-band by roster seeding."""

    id: int
    name: str
    current_club: str
    country: str = ""
    position: str = ""
    birth_year: int | None = None
    alt_spellings: tuple[str, ...] = ()
    confusion_risk: str | None = None
    status: str = ""
    sweep_tier: SweepTier | None = None
    rumours: RumourLog = field(default_factory=RumourLog)

    # store fields this model does not interpret, kept for round-tripping
    extras: dict[str, object] = field(default_factory=dict["str", "object"], repr=False)

    @property
    def all_names(self) -> tuple[str, ...]:
        return (self.name, *self.alt_spellings)
