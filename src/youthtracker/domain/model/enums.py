"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class SweepTier(StrEnum):
    """Search-priority class of a player. Unrelated to source reliability tiers."""

    A = "A"
    B = "B"
    C = "C"


class PlayerStatus(StrEnum):
    ACTIVE = "active"
    CONFIRMED = "confirmed"
    MONITORING = "monitoring"
    NO_RUMOURS = "no_rumours"


class SweepType(StrEnum):
    FULL = "full"
    PRIORITY = "priority"
    FLASH = "flash"


class IssueKind(StrEnum):
    """Category of a validation finding."""

    SCHEMA = "schema"
    IDENTITY = "identity"
    TIER = "tier"
    ESCALATION = "escalation"
    TIER_CHANGE = "tier_change"


MIN_SOURCE_TIER = 1
MAX_SOURCE_TIER = 4
# source tiers at or above this one mark speculative reporting
SPECULATIVE_SOURCE_TIER = 3
