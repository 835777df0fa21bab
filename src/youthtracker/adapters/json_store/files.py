"""Low-level JSON file helpers for the stores."""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path

from youthtracker.domain.errors import StoreError


def read_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise StoreError(f"{path} not found") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise StoreError(f"Cannot read {path}: {exc}") from exc


def write_json(path: Path, payload: object) -> None:
    """Write ``payload`` through a temporary sibling file and an atomic replace."""

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        tmp_path.replace(path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise StoreError(f"Cannot write {path}: {exc}") from exc


def snapshot(path: Path, backup_dir: Path, *, store: str, timestamp: str) -> Path:
    """Copy ``path`` to ``<backup_dir>/<store>_pre_sweep_<timestamp>.json``."""

    target = backup_dir / f"{store}_pre_sweep_{timestamp}.json"
    try:
        backup_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(path, target)
    except OSError as exc:
        raise StoreError(f"Cannot back up {path} to {target}: {exc}") from exc
    return target
