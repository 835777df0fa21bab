"""Translate upstream delta payloads into domain records, and back for reports."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from youthtracker.domain.errors import ParseError
from youthtracker.domain.validation import (
    CandidateDeltaItem,
    Escalation,
    NeedsReviewItem,
    SweepDelta,
    TierChange,
)

from .extract import extract_json_object
from .schema import (
    CandidatePayload,
    DeltaPayload,
    EscalationPayload,
    NeedsReviewPayload,
    TierChangePayload,
)

if TYPE_CHECKING:
    from youthtracker.domain.model import RumourRecord
    from youthtracker.domain.validation import ValidatedDelta

log = logging.getLogger(__name__)

_NOT_AN_OBJECT = "record is not a JSON object"


def _describe(exc: ValidationError) -> tuple[str, ...]:
    messages: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "record"
        messages.append(f"{location}: {error['msg']}")
    return tuple(messages)


def _as_mapping(value: object) -> Mapping[str, object] | None:
    if isinstance(value, Mapping):
        return cast(Mapping[str, object], value)
    return None


def _loose_name(raw: Mapping[str, object]) -> str:
    name = raw.get("playerName")
    return name if isinstance(name, str) else ""


def parse_delta_text(text: str) -> SweepDelta:
    """Extract, decode and translate raw upstream output into a ``SweepDelta``.

    Raises ``ParseError`` (carrying ``text``) when no usable delta object is
    present. Malformed individual records do not raise; they are carried
    forward with ``parse_errors`` for the validator to reject.
    """

    fragment = extract_json_object(text)
    try:
        decoded = json.loads(fragment)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Failed to parse delta JSON: {exc}", raw_text=text) from exc

    try:
        payload = DeltaPayload.model_validate(decoded)
    except ValidationError as exc:
        raise ParseError(
            f"Delta JSON has an unexpected shape: {'; '.join(_describe(exc))}", raw_text=text
        ) from exc

    return SweepDelta(
        sweep_date=payload.sweep_date,
        sweep_type=payload.sweep_type,
        sweep_number=payload.sweep_number,
        baseline_items=payload.baseline_items,
        players_searched=payload.players_searched,
        new_intel=[parse_candidate(raw) for raw in payload.new_intel],
        escalations=[parse_escalation(raw) for raw in payload.escalations],
        tier_changes=[parse_tier_change(raw) for raw in payload.tier_changes],
        no_change=[str(name) for name in payload.no_change],
        needs_review=[
            review for raw in payload.needs_review if (review := parse_needs_review(raw))
        ],
    )


def parse_candidate(raw: object) -> CandidateDeltaItem:
    mapping = _as_mapping(raw)
    if mapping is None:
        return CandidateDeltaItem(player_id=None, parse_errors=(_NOT_AN_OBJECT,))
    try:
        candidate = CandidatePayload.model_validate(mapping)
    except ValidationError as exc:
        return CandidateDeltaItem(
            player_id=mapping.get("playerId"),
            player_name=_loose_name(mapping),
            rumour=_as_mapping(mapping.get("rumor", mapping.get("rumour"))),
            parse_errors=_describe(exc),
        )
    return CandidateDeltaItem(
        player_id=candidate.player_id,
        player_name=candidate.player_name,
        rumour=candidate.rumor,
        intel_updates=candidate.intel_updates,
        reasoning=candidate.reasoning,
    )


def parse_escalation(raw: object) -> Escalation:
    mapping = _as_mapping(raw)
    if mapping is None:
        return Escalation(player_id=None, parse_errors=(_NOT_AN_OBJECT,))
    try:
        escalation = EscalationPayload.model_validate(mapping)
    except ValidationError as exc:
        return Escalation(
            player_id=mapping.get("playerId"),
            player_name=_loose_name(mapping),
            new_value=mapping.get("newValue"),
            parse_errors=_describe(exc),
        )
    return Escalation(
        player_id=escalation.player_id,
        player_name=escalation.player_name,
        field=escalation.field,
        old_value=escalation.old_value,
        new_value=escalation.new_value,
        source=escalation.source,
    )


def parse_tier_change(raw: object) -> TierChange:
    mapping = _as_mapping(raw)
    if mapping is None:
        return TierChange(player_id=None, parse_errors=(_NOT_AN_OBJECT,))
    try:
        change = TierChangePayload.model_validate(mapping)
    except ValidationError as exc:
        return TierChange(
            player_id=mapping.get("playerId"),
            player_name=_loose_name(mapping),
            new_tier=mapping.get("newTier"),
            parse_errors=_describe(exc),
        )
    return TierChange(
        player_id=change.player_id,
        player_name=change.player_name,
        old_tier=change.old_tier,
        new_tier=change.new_tier,
        reason=change.reason,
    )


def parse_needs_review(raw: object) -> NeedsReviewItem | None:
    mapping = _as_mapping(raw)
    if mapping is None:
        log.warning("Ignoring needsReview entry that is not an object: %r", raw)
        return None
    try:
        review = NeedsReviewPayload.model_validate(mapping)
    except ValidationError as exc:
        log.warning("Ignoring malformed needsReview entry: %s", "; ".join(_describe(exc)))
        return None
    return NeedsReviewItem(
        player_id=review.player_id,
        player_name=review.player_name,
        detail=review.detail,
        reason=review.reason,
    )


def rumour_to_payload(rumour: RumourRecord) -> dict[str, object]:
    return {
        "date": rumour.date,
        "club": rumour.club,
        "detail": rumour.detail,
        "source": rumour.source,
        "tier": rumour.tier,
        "status": rumour.status,
        "recent": rumour.recent,
    }


def delta_report(validated: ValidatedDelta) -> dict[str, object]:
    """Serialise the filtered delta in the upstream field layout."""

    source = validated.source
    return {
        "sweepDate": source.sweep_date,
        "sweepType": source.sweep_type,
        "sweepNumber": source.sweep_number,
        "baselineItems": source.baseline_items,
        "playersSearched": source.players_searched,
        "newIntel": [
            {
                "playerId": item.player_id,
                "playerName": item.player_name,
                "rumor": rumour_to_payload(item.rumour) if item.rumour is not None else None,
                "intelUpdates": dict(item.intel_updates) if item.intel_updates else None,
                "reasoning": item.reasoning,
            }
            for item in validated.accepted
        ],
        "escalations": [
            {
                "playerId": escalation.player_id,
                "playerName": escalation.player_name,
                "field": escalation.field,
                "oldValue": escalation.old_value,
                "newValue": escalation.new_value,
                "source": escalation.source,
            }
            for escalation in validated.escalations
        ],
        "tierChanges": [
            {
                "playerId": change.player_id,
                "playerName": change.player_name,
                "oldTier": change.old_tier,
                "newTier": change.new_tier,
                "reason": change.reason,
            }
            for change in validated.tier_changes
        ],
        "noChange": list(source.no_change),
        "needsReview": [
            {
                "playerId": review.player_id,
                "playerName": review.player_name,
                "detail": review.detail,
                "reason": review.reason,
            }
            for review in validated.needs_review
        ],
        "tierWarnings": [
            {
                "playerId": warning.player_id,
                "playerName": warning.player_name,
                "warning": warning.message,
            }
            for warning in validated.warnings
        ],
    }
