"""Validation of upstream candidate deltas.

Layered checks, leaves first:
1) normalization of player and club names
2) structural validation of a rumour candidate
3) identity checks against the roster
4) duplicate detection against a player's history
5) advisory tier consistency
6) batch partitioning into accepted / rejected / filtered
"""

from __future__ import annotations

from .contracts import (
    AcceptedIntel,
    CandidateDeltaItem,
    Escalation,
    NeedsReviewItem,
    SweepDelta,
    TierChange,
    TierWarning,
    ValidatedDelta,
    ValidationResult,
)
from .delta import validate_delta, validate_escalation, validate_tier_change
from .duplicates import is_duplicate, token_overlap_ratio
from .identity import validate_player_identity
from .normalize import normalize_club, normalize_name
from .schema import to_rumour_record, validate_rumour
from .tiers import check_tier_consistency

__all__ = [
    "AcceptedIntel",
    "CandidateDeltaItem",
    "Escalation",
    "NeedsReviewItem",
    "SweepDelta",
    "TierChange",
    "TierWarning",
    "ValidatedDelta",
    "ValidationResult",
    "check_tier_consistency",
    "is_duplicate",
    "normalize_club",
    "normalize_name",
    "to_rumour_record",
    "token_overlap_ratio",
    "validate_delta",
    "validate_escalation",
    "validate_player_identity",
    "validate_rumour",
    "validate_tier_change",
]
