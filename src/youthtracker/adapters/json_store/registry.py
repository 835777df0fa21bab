"""Loading of the club alias registry."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from youthtracker.domain.model import ClubRegistry

from .schema import ClubsFile
from .translator import parse_club_registry

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


def load_club_registry(path: Path) -> ClubRegistry:
    """Load ``clubs.json``; a missing or invalid file yields an empty registry.

    Validation still runs without the registry, with weaker club matching
    and no academy pipeline checks.
    """

    try:
        with path.open(encoding="utf-8") as handle:
            payload = ClubsFile.model_validate(json.load(handle))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        log.warning("%s not found or invalid (%s); club validation limited", path, exc)
        return ClubRegistry.empty()

    registry = parse_club_registry(payload)
    log.debug(
        "Loaded club registry: %s clubs, %s academy pipelines",
        len(registry.aliases),
        len(registry.academy_pipelines),
    )
    return registry
