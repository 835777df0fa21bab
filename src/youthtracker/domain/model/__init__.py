"""Public domain model surface."""

from __future__ import annotations

from youthtracker.domain.model.enums import (
    MAX_SOURCE_TIER,
    MIN_SOURCE_TIER,
    SPECULATIVE_SOURCE_TIER,
    IssueKind,
    PlayerStatus,
    SweepTier,
    SweepType,
)
from youthtracker.domain.model.player import PlayerRecord, RumourLog, RumourRecord
from youthtracker.domain.model.registry import ClubRegistry
from youthtracker.domain.model.roster import (
    DuplicatePlayerIdError,
    IntelStore,
    Roster,
    RosterMeta,
)

__all__ = [  # noqa: RUF022
    # enums
    "IssueKind",
    "PlayerStatus",
    "SweepTier",
    "SweepType",
    "MIN_SOURCE_TIER",
    "MAX_SOURCE_TIER",
    "SPECULATIVE_SOURCE_TIER",
    # players
    "PlayerRecord",
    "RumourLog",
    "RumourRecord",
    # aggregates
    "Roster",
    "RosterMeta",
    "IntelStore",
    "DuplicatePlayerIdError",
    # configuration
    "ClubRegistry",
]
