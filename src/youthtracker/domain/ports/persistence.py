"""Ports for the durable roster and intel stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from youthtracker.domain.model import IntelStore, Roster


@runtime_checkable
class StoreUnitOfWork(Protocol):
    """Load both stores, then write back whichever changed.

    ``commit`` snapshots each store it is about to overwrite. The two stores
    are written one after the other; there is no transaction spanning both.
    """

    roster: Roster
    intel: IntelStore
    # snapshot files taken by the last commit
    backups: list[Path]

    def __enter__(self) -> StoreUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self, *, roster_changed: bool, intel_changed: bool) -> None: ...
