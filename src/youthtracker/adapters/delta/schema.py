"""Pydantic models describing the upstream delta payload.

The envelope is validated as a whole; each record inside it is validated
on its own so that one malformed record never sinks the batch.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, field_validator


def _none_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _none_to_empty_str(value: object) -> object:
    return "" if value is None else value


def _int_or_none(value: object) -> object:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class DeltaBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DeltaPayload(DeltaBaseModel):
    sweep_date: str | None = Field(default=None, alias="sweepDate")
    sweep_type: str | None = Field(default=None, alias="sweepType")
    sweep_number: int | None = Field(default=None, alias="sweepNumber")
    baseline_items: int | None = Field(default=None, alias="baselineItems")
    players_searched: int | None = Field(default=None, alias="playersSearched")
    new_intel: list[object] = Field(default_factory=list, alias="newIntel")
    escalations: list[object] = Field(default_factory=list)
    tier_changes: list[object] = Field(default_factory=list, alias="tierChanges")
    no_change: list[object] = Field(default_factory=list, alias="noChange")
    needs_review: list[object] = Field(default_factory=list, alias="needsReview")

    _normalize_lists = field_validator(
        "new_intel", "escalations", "tier_changes", "no_change", "needs_review", mode="before"
    )(_none_to_empty_list)
    _normalize_ints = field_validator(
        "sweep_number", "baseline_items", "players_searched", mode="before"
    )(_int_or_none)


class CandidatePayload(DeltaBaseModel):
    player_id: StrictInt = Field(alias="playerId")
    player_name: str = Field(default="", alias="playerName")
    rumor: dict[str, object] | None = Field(
        default=None, validation_alias=AliasChoices("rumor", "rumour")
    )
    intel_updates: dict[str, object] | None = Field(default=None, alias="intelUpdates")
    reasoning: str = ""

    _normalize_strings = field_validator("player_name", "reasoning", mode="before")(
        _none_to_empty_str
    )


class EscalationPayload(DeltaBaseModel):
    player_id: StrictInt = Field(alias="playerId")
    player_name: str = Field(default="", alias="playerName")
    field: str = "status"
    old_value: str | None = Field(default=None, alias="oldValue")
    new_value: str = Field(alias="newValue")
    source: str = ""

    _normalize_strings = field_validator("player_name", "source", mode="before")(
        _none_to_empty_str
    )


class TierChangePayload(DeltaBaseModel):
    player_id: StrictInt = Field(alias="playerId")
    player_name: str = Field(default="", alias="playerName")
    old_tier: str | None = Field(default=None, alias="oldTier")
    new_tier: str = Field(alias="newTier")
    reason: str = ""

    _normalize_strings = field_validator("player_name", "reason", mode="before")(
        _none_to_empty_str
    )


class NeedsReviewPayload(DeltaBaseModel):
    player_id: int | None = Field(default=None, alias="playerId")
    player_name: str = Field(default="", alias="playerName")
    detail: str = ""
    reason: str = ""

    _normalize_strings = field_validator("player_name", "detail", "reason", mode="before")(
        _none_to_empty_str
    )
    _normalize_ints = field_validator("player_id", mode="before")(_int_or_none)
