"""Apply a validated delta to the in-memory roster and intel store.

The engine only mutates memory. Durable writes, and the backups taken
before them, belong to the store's unit of work.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from youthtracker.domain.model import SweepTier
from youthtracker.domain.validation.duplicates import is_duplicate

if TYPE_CHECKING:
    from youthtracker.domain.model import ClubRegistry, IntelStore, Roster, RumourRecord
    from youthtracker.domain.validation import (
        AcceptedIntel,
        Escalation,
        TierChange,
        ValidatedDelta,
    )

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RumourAdded:
    player_id: int
    rumour: RumourRecord


@dataclass(frozen=True, slots=True)
class IntelUpdated:
    player_id: int
    fields: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FieldChanged:
    player_id: int
    old_value: str | None
    new_value: str


@dataclass(slots=True)
class MergeResult:
    """Everything the merge changed, or deliberately skipped."""

    added: list[RumourAdded] = field(default_factory=list["RumourAdded"])
    duplicates: list[AcceptedIntel] = field(default_factory=list["AcceptedIntel"])
    intel_updates: list[IntelUpdated] = field(default_factory=list["IntelUpdated"])
    status_changes: list[FieldChanged] = field(default_factory=list["FieldChanged"])
    tier_changes: list[FieldChanged] = field(default_factory=list["FieldChanged"])

    @property
    def roster_changed(self) -> bool:
        return bool(self.added or self.status_changes or self.tier_changes)

    @property
    def intel_changed(self) -> bool:
        return bool(self.intel_updates)

    @property
    def changed(self) -> bool:
        return self.roster_changed or self.intel_changed


@dataclass(slots=True)
class MergeEngine:
    roster: Roster
    intel: IntelStore
    registry: ClubRegistry

    def apply(self, delta: ValidatedDelta) -> MergeResult:
        """Merge accepted intel, escalations and tier changes, in that order."""

        result = MergeResult()
        for item in delta.accepted:
            self._merge_intel_item(item, result)
        for escalation in delta.escalations:
            self._apply_escalation(escalation, result)
        for change in delta.tier_changes:
            self._apply_tier_change(change, result)
        return result

    def _merge_intel_item(self, item: AcceptedIntel, result: MergeResult) -> None:
        player = self.roster.get(item.player_id)
        if player is None:
            log.warning("SKIP: Player ID %s not found", item.player_id)
            return

        if item.rumour is not None:
            # checked against the live history so earlier items of this batch count too
            if is_duplicate(item.rumour, player.rumours, self.registry):
                log.info("SKIP (dupe): %s — %s", item.player_name, item.rumour.detail)
                result.duplicates.append(item)
                return
            player.rumours.prepend(item.rumour)
            result.added.append(RumourAdded(player.id, item.rumour))
            log.info(
                "ADD: %s | %s | %s | %s",
                item.player_name,
                item.rumour.date,
                item.rumour.club,
                item.rumour.detail,
            )

        if item.intel_updates:
            changed_fields = self.intel.merge(player.id, item.intel_updates)
            if changed_fields:
                result.intel_updates.append(IntelUpdated(player.id, changed_fields))
                log.info("INTEL UPDATE: %s — %s", item.player_name, ", ".join(changed_fields))

    def _apply_escalation(self, escalation: Escalation, result: MergeResult) -> None:
        player = self.roster.get(escalation.player_id)
        if player is None or escalation.field != "status":
            return
        new_status = str(escalation.new_value)
        if player.status == new_status:
            return
        old_status = player.status or None
        player.status = new_status
        result.status_changes.append(FieldChanged(player.id, old_status, new_status))
        log.info("%s: %s → %s", escalation.player_name, old_status, new_status)

    def _apply_tier_change(self, change: TierChange, result: MergeResult) -> None:
        player = self.roster.get(change.player_id)
        if player is None:
            return
        new_tier = SweepTier(str(change.new_tier))
        if player.sweep_tier == new_tier:
            return
        old_tier = player.sweep_tier.value if player.sweep_tier is not None else None
        player.sweep_tier = new_tier
        result.tier_changes.append(FieldChanged(player.id, old_tier, new_tier.value))
        log.info(
            "%s: Tier %s → Tier %s (%s)", change.player_name, old_tier, new_tier, change.reason
        )
