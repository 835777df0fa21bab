"""Shared validation contracts.

Candidate records arrive from an untrusted upstream producer, so their
payloads are kept loosely typed until the validators have vetted them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

    from youthtracker.domain.errors import ItemRejected, RecordDropped
    from youthtracker.domain.model import IssueKind, RumourRecord

RumourCandidate: TypeAlias = "Mapping[str, object]"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Validity flag plus every human-readable finding, in discovery order."""

    kind: IssueKind
    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @classmethod
    def from_errors(cls, kind: IssueKind, errors: list[str]) -> ValidationResult:
        return cls(kind=kind, errors=tuple(errors))


@dataclass(frozen=True, slots=True, kw_only=True)
class CandidateDeltaItem:
    """One proposed addition for a player, as claimed by the upstream producer."""

    player_id: object
    player_name: str = ""
    rumour: RumourCandidate | None = None
    intel_updates: Mapping[str, object] | None = None
    reasoning: str = ""
    # structural problems found while decoding the item itself
    parse_errors: tuple[str, ...] = ()

    @property
    def detail(self) -> str | None:
        if self.rumour is None:
            return None
        detail = self.rumour.get("detail")
        return detail if isinstance(detail, str) else None


@dataclass(frozen=True, slots=True, kw_only=True)
class Escalation:
    """Proposed change of a player's status field."""

    player_id: object
    player_name: str = ""
    field: str = "status"
    old_value: str | None = None
    new_value: object = None
    source: str = ""
    parse_errors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class TierChange:
    """Proposed change of a player's sweep tier (A/B/C)."""

    player_id: object
    player_name: str = ""
    old_tier: str | None = None
    new_tier: object = None
    reason: str = ""
    parse_errors: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NeedsReviewItem:
    player_id: object
    player_name: str
    detail: str
    reason: str


@dataclass(slots=True, kw_only=True)
class SweepDelta:
    """A parsed, not yet validated batch of candidate records."""

    sweep_date: str | None = None
    sweep_type: str | None = None
    sweep_number: int | None = None
    baseline_items: int | None = None
    players_searched: int | None = None
    new_intel: list[CandidateDeltaItem] = field(default_factory=list["CandidateDeltaItem"])
    escalations: list[Escalation] = field(default_factory=list["Escalation"])
    tier_changes: list[TierChange] = field(default_factory=list["TierChange"])
    no_change: list[str] = field(default_factory=list["str"])
    needs_review: list[NeedsReviewItem] = field(default_factory=list["NeedsReviewItem"])


@dataclass(frozen=True, slots=True, kw_only=True)
class AcceptedIntel:
    """A candidate item that passed every blocking check."""

    player_id: int
    player_name: str
    rumour: RumourRecord | None = None
    intel_updates: Mapping[str, object] | None = None
    reasoning: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class TierWarning:
    player_id: object
    player_name: str
    message: str


@dataclass(slots=True, kw_only=True)
class ValidatedDelta:
    """Partition of a delta into accepted, rejected and filtered records."""

    source: SweepDelta
    accepted: list[AcceptedIntel] = field(default_factory=list["AcceptedIntel"])
    rejected: list[ItemRejected[CandidateDeltaItem]] = field(
        default_factory=list["ItemRejected[CandidateDeltaItem]"]
    )
    warnings: list[TierWarning] = field(default_factory=list["TierWarning"])
    escalations: list[Escalation] = field(default_factory=list["Escalation"])
    tier_changes: list[TierChange] = field(default_factory=list["TierChange"])
    dropped: list[RecordDropped[Escalation | TierChange]] = field(
        default_factory=list["RecordDropped[Escalation | TierChange]"]
    )
    needs_review: list[NeedsReviewItem] = field(default_factory=list["NeedsReviewItem"])
