from __future__ import annotations

from pathlib import Path

import pytest

from youthtracker.app import SweepSummary
from youthtracker.config import MissingConfigurationError
from youthtracker.domain.errors import StoreError
from youthtracker.domain.model import SweepType
from youthtracker.ui import cli as cli_module


def _summary(**_: object) -> SweepSummary:
    return SweepSummary(sweep_type=SweepType.FULL, players_searched=0)


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    calls: dict[str, object] = {}

    def fake_sweep(**kwargs: object) -> SweepSummary:
        calls["sweep"] = kwargs
        return _summary()

    def fake_apply(path: Path, **kwargs: object) -> SweepSummary:
        calls["apply"] = (path, kwargs)
        return _summary()

    monkeypatch.setattr(cli_module, "sweep_with_anthropic", fake_sweep)
    monkeypatch.setattr(cli_module, "apply_delta_file", fake_apply)
    return calls


def test_sweep_defaults(captured: dict[str, object]) -> None:
    cli_module.main(["sweep"])

    assert captured["sweep"] == {
        "sweep_type": SweepType.FULL,
        "flash_player": None,
        "dry_run": False,
    }


def test_flash_sweep(captured: dict[str, object]) -> None:
    cli_module.main(["sweep", "--type", "flash", "--player", "Dabo", "--dry-run", "--verbose"])

    assert captured["sweep"] == {
        "sweep_type": SweepType.FLASH,
        "flash_player": "Dabo",
        "dry_run": True,
    }


def test_apply_command(captured: dict[str, object]) -> None:
    cli_module.main(["apply", "sweeps/delta.json", "--dry-run"])

    assert captured["apply"] == (Path("sweeps/delta.json"), {"dry_run": True})


@pytest.mark.parametrize(
    "argv",
    [
        ["sweep", "--player", "Dabo"],
        ["sweep", "--type", "flash"],
        ["sweep", "--type", "weekly"],
        [],
    ],
)
def test_invalid_arguments_exit_with_2(captured: dict[str, object], argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(argv)

    assert excinfo.value.code == 2
    assert captured == {}


def test_missing_configuration_exits_with_2(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_sweep(**_: object) -> SweepSummary:
        raise MissingConfigurationError("Missing configuration for: ANTHROPIC_API_KEY")

    monkeypatch.setattr(cli_module, "sweep_with_anthropic", fake_sweep)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sweep"])

    assert excinfo.value.code == 2


def test_fatal_sweep_error_exits_with_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_apply(*_: object, **__: object) -> SweepSummary:
        raise StoreError("players.json not found")

    monkeypatch.setattr(cli_module, "apply_delta_file", fake_apply)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apply", "delta.json"])

    assert excinfo.value.code == 1
