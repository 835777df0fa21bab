from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from tests.helpers.tracker import (
    players_file_payload,
    sample_intel,
    sample_registry,
    sample_roster,
)
from youthtracker.config import StorageConfig

if TYPE_CHECKING:
    from pathlib import Path

    from youthtracker.domain.model import ClubRegistry, IntelStore, Roster


@pytest.fixture
def registry() -> ClubRegistry:
    return sample_registry()


@pytest.fixture
def roster() -> Roster:
    return sample_roster()


@pytest.fixture
def intel() -> IntelStore:
    return sample_intel()


@pytest.fixture
def storage(tmp_path: Path) -> StorageConfig:
    return StorageConfig(data_dir=tmp_path / "data", sweeps_dir=tmp_path / "sweeps")


@pytest.fixture
def seeded_storage(storage: StorageConfig) -> StorageConfig:
    data_dir = storage.resolve_data_dir()
    data_dir.mkdir(parents=True)
    storage.players_path.write_text(json.dumps(players_file_payload()), encoding="utf-8")
    storage.intel_path.write_text(
        json.dumps({"1": {"contract": "2027"}}, ensure_ascii=False), encoding="utf-8"
    )
    storage.clubs_path.write_text(
        json.dumps(
            {
                "aliases": {"Sporting CP": ["Sporting"]},
                "academyPipelines": {"Diambars": "FC Metz"},
            }
        ),
        encoding="utf-8",
    )
    return storage
