"""Batch validation of a parsed delta.

Candidate items are all-or-nothing: any schema or identity error rejects the
whole item and routes it to manual review. Escalations and tier changes are
filtered silently. Tier warnings are advisory and never change acceptance.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from youthtracker.domain.errors import ItemRejected, RecordDropped
from youthtracker.domain.model import IssueKind, PlayerStatus, SweepTier

from .contracts import (
    AcceptedIntel,
    NeedsReviewItem,
    TierWarning,
    ValidatedDelta,
    ValidationResult,
)
from .identity import validate_player_identity
from .schema import to_rumour_record, validate_rumour
from .tiers import check_tier_consistency

if TYPE_CHECKING:
    from youthtracker.domain.model import ClubRegistry, Roster

    from .contracts import CandidateDeltaItem, Escalation, SweepDelta, TierChange

log = logging.getLogger(__name__)

VALID_STATUSES: Final = tuple(status.value for status in PlayerStatus)
VALID_SWEEP_TIERS: Final = tuple(tier.value for tier in SweepTier)
ESCALATION_FIELDS: Final = ("status",)
AUTO_REJECTED_PREFIX: Final = "Auto-rejected: "
UNKNOWN_NAME: Final = "Unknown"


def validate_escalation(escalation: Escalation, roster: Roster) -> ValidationResult:
    errors: list[str] = list(escalation.parse_errors)
    if roster.get(escalation.player_id) is None:
        errors.append(f"Player ID {escalation.player_id} not found")
        return ValidationResult.from_errors(IssueKind.ESCALATION, errors)
    if escalation.field not in ESCALATION_FIELDS:
        errors.append(f'Unsupported escalation field "{escalation.field}"')
    elif escalation.new_value not in VALID_STATUSES:
        errors.append(
            f'Invalid status "{escalation.new_value}" — must be one of: '
            f"{', '.join(VALID_STATUSES)}"
        )
    return ValidationResult.from_errors(IssueKind.ESCALATION, errors)


def validate_tier_change(change: TierChange, roster: Roster) -> ValidationResult:
    errors: list[str] = list(change.parse_errors)
    if roster.get(change.player_id) is None:
        errors.append(f"Player ID {change.player_id} not found")
        return ValidationResult.from_errors(IssueKind.TIER_CHANGE, errors)
    if change.new_tier not in VALID_SWEEP_TIERS:
        errors.append(f'Invalid tier "{change.new_tier}" — must be A, B, or C')
    return ValidationResult.from_errors(IssueKind.TIER_CHANGE, errors)


def candidate_errors(
    item: CandidateDeltaItem,
    roster: Roster,
    registry: ClubRegistry,
) -> list[str]:
    """Collect every blocking error for ``item``, schema errors first."""

    errors: list[str] = list(item.parse_errors)
    if item.rumour is not None:
        errors.extend(validate_rumour(item.rumour).errors)
    errors.extend(validate_player_identity(item, roster, registry).errors)
    return errors


def validate_delta(
    delta: SweepDelta,
    roster: Roster,
    registry: ClubRegistry,
) -> ValidatedDelta:
    """Partition ``delta`` into accepted items, rejections and filtered records."""

    result = ValidatedDelta(source=delta, needs_review=list(delta.needs_review))

    for item in delta.new_intel:
        _validate_item(item, roster=roster, registry=registry, result=result)

    for escalation in delta.escalations:
        outcome = validate_escalation(escalation, roster)
        if outcome.valid:
            result.escalations.append(escalation)
            continue
        reason = "; ".join(outcome.errors)
        log.warning("REJECTED ESCALATION: %s — %s", escalation.player_name, reason)
        result.dropped.append(RecordDropped(escalation, IssueKind.ESCALATION, reason))

    for change in delta.tier_changes:
        outcome = validate_tier_change(change, roster)
        if outcome.valid:
            result.tier_changes.append(change)
            continue
        reason = "; ".join(outcome.errors)
        log.warning("REJECTED TIER CHANGE: %s — %s", change.player_name, reason)
        result.dropped.append(RecordDropped(change, IssueKind.TIER_CHANGE, reason))

    log.info(
        "Validation complete: %s accepted, %s rejected, %s tier warnings, %s records dropped",
        len(result.accepted),
        len(result.rejected),
        len(result.warnings),
        len(result.dropped),
    )
    return result


def _validate_item(
    item: CandidateDeltaItem,
    *,
    roster: Roster,
    registry: ClubRegistry,
    result: ValidatedDelta,
) -> None:
    errors = candidate_errors(item, roster, registry)

    if item.rumour is not None:
        for warning in check_tier_consistency(item.rumour).errors:
            log.warning("TIER WARNING: %s — %s", item.player_name, warning)
            result.warnings.append(
                TierWarning(player_id=item.player_id, player_name=item.player_name, message=warning)
            )

    if errors:
        rejection = ItemRejected(item, tuple(errors))
        log.warning("REJECTED: %s — %s", item.player_name or UNKNOWN_NAME, rejection.reason)
        result.rejected.append(rejection)
        result.needs_review.append(
            NeedsReviewItem(
                player_id=item.player_id,
                player_name=item.player_name or UNKNOWN_NAME,
                detail=item.detail or UNKNOWN_NAME,
                reason=AUTO_REJECTED_PREFIX + rejection.reason,
            )
        )
        return

    # identity validation guarantees the id resolves to an int
    player_id = item.player_id
    if not isinstance(player_id, int):  # pragma: no cover
        raise TypeError(f"Accepted item has non-integer player id: {player_id!r}")
    result.accepted.append(
        AcceptedIntel(
            player_id=player_id,
            player_name=item.player_name,
            rumour=to_rumour_record(item.rumour) if item.rumour is not None else None,
            intel_updates=dict(item.intel_updates) if item.intel_updates else None,
            reasoning=item.reasoning,
        )
    )
