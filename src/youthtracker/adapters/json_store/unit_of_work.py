"""JSON-file backed unit of work for the roster and intel stores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from youthtracker.domain.errors import StoreError
from youthtracker.domain.model import DuplicatePlayerIdError, IntelStore, Roster

from .files import read_json, snapshot, write_json
from .schema import PlayersFile
from .translator import dump_intel, dump_roster, parse_intel, parse_roster

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from youthtracker.config.storage import StorageConfig
    from youthtracker.domain.ports.persistence import StoreUnitOfWork

log = logging.getLogger(__name__)

ROSTER_STORE = "players"
INTEL_STORE = "intel"


def load_roster(path: Path) -> Roster:
    payload = read_json(path)
    try:
        return parse_roster(PlayersFile.model_validate(payload))
    except (ValidationError, DuplicatePlayerIdError) as exc:
        raise StoreError(f"{path} is not a valid roster: {exc}") from exc


def load_intel(path: Path) -> IntelStore:
    """Load the intel store; a missing file is an empty store."""

    if not path.exists():
        log.info("%s not found; starting with an empty intel store", path)
        return IntelStore()
    payload = read_json(path)
    if not isinstance(payload, dict):
        raise StoreError(f"{path} is not a valid intel store: expected an object")
    return parse_intel(payload)


class JsonStoreUnitOfWork:
    """Loads both stores on enter; ``commit`` backs up, then rewrites, what changed.

    The roster is written before the intel store. A failure between the two
    writes leaves the roster updated and the intel store untouched; the
    backups taken beforehand are the recovery path.
    """

    roster: Roster
    intel: IntelStore

    def __init__(self, storage: StorageConfig, *, timestamp: str) -> None:
        self._storage = storage
        self._timestamp = timestamp
        self.backups: list[Path] = []

    def __enter__(self) -> JsonStoreUnitOfWork:
        self.roster = load_roster(self._storage.players_path)
        self.intel = load_intel(self._storage.intel_path)
        log.debug(
            "Loaded %s players (%s rumours) and %s intel entries",
            len(self.roster),
            self.roster.rumour_count,
            len(self.intel),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool:
        return False

    def commit(self, *, roster_changed: bool, intel_changed: bool) -> None:
        targets: list[tuple[str, Path, object]] = []
        if roster_changed:
            targets.append((ROSTER_STORE, self._storage.players_path, dump_roster(self.roster)))
        if intel_changed:
            targets.append((INTEL_STORE, self._storage.intel_path, dump_intel(self.intel)))
        if not targets:
            return

        backup_dir = self._storage.backups_dir()
        for store, path, _payload in targets:
            if path.exists():
                backup = snapshot(path, backup_dir, store=store, timestamp=self._timestamp)
                self.backups.append(backup)
                log.info("Backup: %s", backup)

        for store, path, payload in targets:
            write_json(path, payload)
            log.info("Saved %s store: %s", store, path)


if TYPE_CHECKING:
    _uow_check: StoreUnitOfWork = JsonStoreUnitOfWork(
        StorageConfig(data_dir=Path("data"), sweeps_dir=Path("sweeps")), timestamp=""
    )
