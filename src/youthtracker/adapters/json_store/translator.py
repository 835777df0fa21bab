"""Translate between store payloads and domain aggregates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from youthtracker.domain.model import (
    ClubRegistry,
    IntelStore,
    PlayerRecord,
    Roster,
    RosterMeta,
    RumourLog,
    RumourRecord,
    SweepTier,
)

from .schema import ClubsFile, MetaPayload, PlayerPayload, PlayersFile, RumourPayload

if TYPE_CHECKING:
    from collections.abc import Mapping

log = logging.getLogger(__name__)


def _extras(payload: PlayerPayload | MetaPayload | PlayersFile) -> dict[str, object]:
    return dict(payload.model_extra or {})


def _sweep_tier(value: str | None, *, player_id: int) -> SweepTier | None:
    if value is None:
        return None
    try:
        return SweepTier(value)
    except ValueError:
        log.warning("Player %s has unknown sweep tier %r; treating as unset", player_id, value)
        return None


def parse_rumour(payload: RumourPayload) -> RumourRecord:
    return RumourRecord(
        date=payload.date,
        club=payload.club,
        detail=payload.detail,
        source=payload.source,
        tier=payload.tier,
        status=payload.status,
        recent=payload.recent,
    )


def parse_player(payload: PlayerPayload) -> PlayerRecord:
    return PlayerRecord(
        id=payload.id,
        name=payload.name,
        current_club=payload.current_club,
        country=payload.country,
        position=payload.position,
        birth_year=payload.birth_year,
        alt_spellings=tuple(payload.alt_spellings),
        confusion_risk=payload.confusion_risk or None,
        status=payload.status,
        sweep_tier=_sweep_tier(payload.sweep_tier, player_id=payload.id),
        rumours=RumourLog(parse_rumour(rumour) for rumour in payload.rumors),
        extras=_extras(payload),
    )


def parse_roster(payload: PlayersFile) -> Roster:
    return Roster(
        players=[parse_player(player) for player in payload.players],
        meta=RosterMeta(
            last_sweep=payload.meta.last_sweep,
            sweep_number=payload.meta.sweep_number,
            extras=_extras(payload.meta),
        ),
        extras=_extras(payload),
    )


def dump_rumour(rumour: RumourRecord) -> dict[str, object]:
    return {
        "date": rumour.date,
        "club": rumour.club,
        "detail": rumour.detail,
        "source": rumour.source,
        "tier": rumour.tier,
        "status": rumour.status,
        "recent": rumour.recent,
    }


def dump_player(player: PlayerRecord) -> dict[str, object]:
    data: dict[str, object] = {
        "id": player.id,
        "name": player.name,
        "altSpellings": list(player.alt_spellings),
        "country": player.country,
        "position": player.position,
        "birthYear": player.birth_year,
        "currentClub": player.current_club,
        "status": player.status,
        "sweepTier": player.sweep_tier.value if player.sweep_tier is not None else None,
    }
    if player.confusion_risk:
        data["confusionRisk"] = player.confusion_risk
    data.update(player.extras)
    data["rumors"] = [dump_rumour(rumour) for rumour in player.rumours]
    return data


def dump_roster(roster: Roster) -> dict[str, object]:
    meta: dict[str, object] = {
        "lastSweep": roster.meta.last_sweep,
        "sweepNumber": roster.meta.sweep_number,
    }
    meta.update(roster.meta.extras)
    data: dict[str, object] = {"meta": meta}
    data.update(roster.extras)
    data["players"] = [dump_player(player) for player in roster.players]
    return data


def parse_intel(payload: Mapping[str, object]) -> IntelStore:
    entries: dict[str, dict[str, object]] = {}
    for key, value in payload.items():
        if not isinstance(value, dict):
            log.warning("Ignoring intel entry %s: expected an object", key)
            continue
        entries[str(key)] = {str(name): field for name, field in value.items()}
    return IntelStore(entries=entries)


def dump_intel(intel: IntelStore) -> dict[str, object]:
    return {key: dict(entry) for key, entry in intel.entries.items()}


def parse_club_registry(payload: ClubsFile) -> ClubRegistry:
    return ClubRegistry.build(
        aliases=payload.aliases,
        academy_pipelines={
            academy: destination if isinstance(destination, str) else ""
            for academy, destination in payload.academy_pipelines.items()
        },
    )
