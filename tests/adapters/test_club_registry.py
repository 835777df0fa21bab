from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from youthtracker.adapters.json_store import load_club_registry

if TYPE_CHECKING:
    from pathlib import Path


def test_registry_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "clubs.json"
    path.write_text(
        json.dumps(
            {
                "aliases": {"Sporting CP": ["Sporting"]},
                "academyPipelines": {"Diambars": "FC Metz", "Aspire": None},
            }
        ),
        encoding="utf-8",
    )

    registry = load_club_registry(path)

    assert registry.canonical_for("sporting") == "Sporting CP"
    assert dict(registry.academy_pipelines) == {"Diambars": "FC Metz", "Aspire": ""}


@pytest.mark.parametrize("content", [None, "{ broken", json.dumps({"aliases": ["x"]})])
def test_unusable_registry_degrades_to_empty(
    tmp_path: Path, content: str | None, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "clubs.json"
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        registry = load_club_registry(path)

    assert registry.is_empty
    assert "club validation limited" in caplog.text


def test_null_sections_are_empty(tmp_path: Path) -> None:
    path = tmp_path / "clubs.json"
    path.write_text(json.dumps({"aliases": None}), encoding="utf-8")

    assert load_club_registry(path).is_empty
