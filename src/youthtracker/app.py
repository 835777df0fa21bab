"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from youthtracker.adapters.anthropic import AnthropicDeltaProducer
from youthtracker.adapters.delta import FileDeltaProducer, delta_report, parse_delta_text
from youthtracker.adapters.json_store import JsonStoreUnitOfWork, load_club_registry
from youthtracker.adapters.json_store.files import write_json
from youthtracker.config import (
    get_anthropic_config,
    get_storage_config,
    get_sweep_config,
)
from youthtracker.domain.errors import ParseError
from youthtracker.domain.merge import MergeEngine, MergeResult
from youthtracker.domain.model import SweepType
from youthtracker.domain.ports.producing import SweepRequest
from youthtracker.domain.sweep import select_targets
from youthtracker.domain.validation import validate_delta

if TYPE_CHECKING:
    from youthtracker.config import StorageConfig, SweepConfig
    from youthtracker.domain.model import ClubRegistry, Roster
    from youthtracker.domain.ports.persistence import StoreUnitOfWork
    from youthtracker.domain.ports.producing import DeltaProducer
    from youthtracker.domain.validation import ValidatedDelta

UnitOfWorkFactory = Callable[[str], "StoreUnitOfWork"]

log = getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def run_timestamp(now: datetime) -> str:
    """File-name safe run timestamp, e.g. ``2026-02-08T14-03-22``."""

    return now.isoformat().replace(":", "-").replace(".", "-")[:19]


def format_sweep_date(now: datetime) -> str:
    """Run date in the rumour date style, e.g. ``Feb 8, 2026``."""

    return f"{now:%b} {now.day}, {now.year}"


@dataclass(slots=True)
class SweepSummary:
    """Counts for one run.

    ``tier_warnings`` counts every advisory tier warning raised during
    validation, including those on items that were then rejected.
    """

    sweep_type: SweepType
    players_searched: int
    accepted: int = 0
    rejected: int = 0
    tier_warnings: int = 0
    escalations: int = 0
    tier_changes: int = 0
    needs_review: int = 0
    added: int = 0
    duplicates: int = 0
    changed: bool = False
    written: bool = False
    report_path: Path | None = None
    backups: list[Path] = field(default_factory=list["Path"])


def _log_validated(validated: ValidatedDelta) -> None:
    log.info(
        "Validation complete: %s accepted, %s rejected",
        len(validated.accepted),
        len(validated.rejected),
    )
    if validated.source.no_change:
        log.info(
            "No change (%s players): %s",
            len(validated.source.no_change),
            ", ".join(validated.source.no_change),
        )
    for review in validated.needs_review:
        log.info("Needs review: %s: %s — %s", review.player_name, review.detail, review.reason)


def _bump_meta(roster: Roster, *, sweep_date: str, sweep_number: int | None) -> None:
    roster.meta.last_sweep = sweep_date
    roster.meta.sweep_number = sweep_number or roster.meta.sweep_number + 1


def _summarise(
    sweep_type: SweepType,
    players_searched: int,
    validated: ValidatedDelta,
    merged: MergeResult,
) -> SweepSummary:
    return SweepSummary(
        sweep_type=sweep_type,
        players_searched=players_searched,
        accepted=len(validated.accepted),
        rejected=len(validated.rejected),
        tier_warnings=len(validated.warnings),
        escalations=len(validated.escalations),
        tier_changes=len(validated.tier_changes),
        needs_review=len(validated.needs_review),
        added=len(merged.added),
        duplicates=len(merged.duplicates),
        changed=merged.changed,
    )


def run_sweep(
    *,
    producer: DeltaProducer,
    storage: StorageConfig | None = None,
    sweep_type: SweepType = SweepType.FULL,
    flash_player: str | None = None,
    dry_run: bool = False,
    registry: ClubRegistry | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    now_provider: Callable[[], datetime] = _utcnow,
) -> SweepSummary:
    """Produce, validate and merge one delta, then persist whatever changed.

    Any ``FatalSweepError`` raised before the merge leaves both stores
    untouched. The validated delta report is written even on dry runs.
    """

    effective_storage = storage or get_storage_config()
    now = now_provider()
    timestamp = run_timestamp(now)
    sweep_date = format_sweep_date(now)
    effective_registry = registry or load_club_registry(effective_storage.clubs_path)
    effective_uow = unit_of_work_factory or (
        lambda ts: JsonStoreUnitOfWork(effective_storage, timestamp=ts)
    )

    with effective_uow(timestamp) as uow:
        targets = select_targets(uow.roster, sweep_type, flash_player=flash_player)
        log.info(
            "Starting %s sweep for %s: %s target player(s) of %s, %s existing intel items%s",
            sweep_type.value,
            sweep_date,
            len(targets),
            len(uow.roster),
            len(uow.intel),
            " (dry run)" if dry_run else "",
        )
        request = SweepRequest(
            sweep_type=sweep_type,
            sweep_date=sweep_date,
            sweep_number=uow.roster.meta.sweep_number + 1,
            baseline_items=uow.roster.rumour_count,
            intel=uow.intel,
        )
        raw_text = asyncio.run(producer(targets, request=request))

        try:
            delta = parse_delta_text(raw_text)
        except ParseError as exc:
            raw_path = effective_storage.raw_response_path()
            raw_path.write_text(exc.raw_text, encoding="utf-8")
            log.error("Failed to parse delta JSON (%s); raw response saved to %s", exc, raw_path)
            raise

        validated = validate_delta(delta, uow.roster, effective_registry)
        _log_validated(validated)

        report_path = effective_storage.report_path(timestamp)
        write_json(report_path, delta_report(validated))
        log.info("Delta report saved: %s", report_path)

        merged = MergeEngine(uow.roster, uow.intel, effective_registry).apply(validated)
        summary = _summarise(sweep_type, len(targets), validated, merged)
        summary.report_path = report_path

        if not merged.changed:
            log.info("No changes detected. Tracker is up to date.")
            return summary
        if dry_run:
            log.info("Dry run: changes detected but not written.")
            return summary

        _bump_meta(uow.roster, sweep_date=sweep_date, sweep_number=delta.sweep_number)
        uow.commit(roster_changed=True, intel_changed=merged.intel_changed)
        summary.written = True
        summary.backups = list(uow.backups)

    log.info(
        "Sweep complete: new=%s, escalated=%s, tier changes=%s, review=%s",
        summary.added,
        summary.escalations,
        summary.tier_changes,
        summary.needs_review,
    )
    return summary


def sweep_with_anthropic(
    *,
    sweep_type: SweepType = SweepType.FULL,
    flash_player: str | None = None,
    dry_run: bool = False,
    storage: StorageConfig | None = None,
    sweep_config: SweepConfig | None = None,
) -> SweepSummary:
    """Run a live sweep against the Anthropic Messages API."""

    effective_storage = storage or get_storage_config()
    config = get_anthropic_config()
    log.info("Using model %s", config.model)
    producer = AnthropicDeltaProducer(
        config,
        sweep=sweep_config or get_sweep_config(),
        findings_path=effective_storage.raw_findings_path(),
    )
    return run_sweep(
        producer=producer,
        storage=effective_storage,
        sweep_type=sweep_type,
        flash_player=flash_player,
        dry_run=dry_run,
    )


def apply_delta_file(
    path: Path,
    *,
    dry_run: bool = False,
    storage: StorageConfig | None = None,
) -> SweepSummary:
    """Validate and merge a previously produced delta file."""

    return run_sweep(
        producer=FileDeltaProducer(Path(path)),
        storage=storage,
        sweep_type=SweepType.FULL,
        dry_run=dry_run,
    )
