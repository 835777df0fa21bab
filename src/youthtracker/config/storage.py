"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_DATA_DIR: Final[str] = "data"
DEFAULT_SWEEPS_DIR: Final[str] = "sweeps"
PLAYERS_FILENAME: Final[str] = "players.json"
INTEL_FILENAME: Final[str] = "intel.json"
CLUBS_FILENAME: Final[str] = "clubs.json"
BACKUPS_DIRNAME: Final[str] = "backups"
RAW_RESPONSE_FILENAME: Final[str] = "last_raw_response.txt"
RAW_FINDINGS_FILENAME: Final[str] = "last_raw_findings.txt"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    sweeps_dir: Path
    players_filename: str = PLAYERS_FILENAME
    intel_filename: str = INTEL_FILENAME
    clubs_filename: str = CLUBS_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def resolve_sweeps_dir(self) -> Path:
        return self.sweeps_dir.expanduser().resolve()

    def ensure_sweeps_dir(self) -> Path:
        sweeps_dir = self.resolve_sweeps_dir()
        sweeps_dir.mkdir(parents=True, exist_ok=True)
        return sweeps_dir

    @property
    def players_path(self) -> Path:
        return self.resolve_data_dir() / self.players_filename

    @property
    def intel_path(self) -> Path:
        return self.resolve_data_dir() / self.intel_filename

    @property
    def clubs_path(self) -> Path:
        return self.resolve_data_dir() / self.clubs_filename

    def backups_dir(self, *, ensure: bool = True) -> Path:
        base = self.ensure_sweeps_dir() if ensure else self.resolve_sweeps_dir()
        backups = base / BACKUPS_DIRNAME
        if ensure:
            backups.mkdir(parents=True, exist_ok=True)
        return backups

    def raw_response_path(self) -> Path:
        return self.ensure_sweeps_dir() / RAW_RESPONSE_FILENAME

    def raw_findings_path(self) -> Path:
        return self.ensure_sweeps_dir() / RAW_FINDINGS_FILENAME

    def report_path(self, timestamp: str) -> Path:
        return self.ensure_sweeps_dir() / f"sweep_{timestamp}.json"


def get_storage_config() -> StorageConfig:
    data_dir = os.getenv("TRACKER_DATA_DIR") or DEFAULT_DATA_DIR
    sweeps_dir = os.getenv("TRACKER_SWEEPS_DIR") or DEFAULT_SWEEPS_DIR
    return StorageConfig(data_dir=Path(data_dir), sweeps_dir=Path(sweeps_dir))
