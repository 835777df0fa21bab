from __future__ import annotations

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
from youthtracker.domain.validation import CandidateDeltaItem


def make_rumour(
    *,
    date: str = "Feb 8, 2026",
    club: str = "Sporting CP",
    detail: str = "Medical scheduled for loan move",
    source: str = "Record",
    tier: int = 2,
    status: str = "rumour",
    recent: bool = True,
) -> RumourRecord:
    return RumourRecord(
        date=date,
        club=club,
        detail=detail,
        source=source,
        tier=tier,
        status=status,
        recent=recent,
    )


def rumour_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": "Mar 2, 2026",
        "club": "RC Strasbourg",
        "detail": "Strasbourg scouts watched him twice in March",
        "source": "AfricaFoot",
        "tier": 2,
        "status": "rumour",
        "recent": True,
    }
    payload.update(overrides)
    return payload


def make_candidate(
    player_id: object = 1,
    player_name: str = "Ettienne Mendy",
    *,
    rumour: dict[str, object] | None = None,
    intel_updates: dict[str, object] | None = None,
) -> CandidateDeltaItem:
    return CandidateDeltaItem(
        player_id=player_id,
        player_name=player_name,
        rumour=rumour if rumour is not None else rumour_payload(),
        intel_updates=intel_updates,
        reasoning="new club interest",
    )


def sample_registry() -> ClubRegistry:
    return ClubRegistry.build(
        aliases={
            "Sporting CP": ["Sporting", "Sporting Lisbon"],
            "FC Metz": ["Metz"],
        },
        academy_pipelines={
            "Diambars": "FC Metz",
            "Right to Dream": "FC Nordsjælland",
        },
    )


def sample_roster() -> Roster:
    players = [
        PlayerRecord(
            id=1,
            name="Ettienne Mendy",
            current_club="Lens",
            country="Senegal",
            position="CB",
            birth_year=2008,
            alt_spellings=("Etienne Mendy",),
            confusion_risk="Édouard Mendy (b.1992, Al-Ahli)",
            status="active",
            sweep_tier=SweepTier.A,
        ),
        PlayerRecord(
            id=2,
            name="Issouf Dabo",
            current_club="Metz",
            country="Burkina Faso",
            position="CM",
            birth_year=2009,
            status="monitoring",
            sweep_tier=SweepTier.B,
        ),
        PlayerRecord(
            id=3,
            name="Souleymane Faye",
            current_club="Génération Foot",
            country="Senegal",
            position="ST",
            birth_year=2010,
            confusion_risk="Souleymane Faye (b.2003, Sporting CP)",
            status="no_rumours",
            sweep_tier=SweepTier.C,
        ),
        PlayerRecord(
            id=4,
            name="Mor Talla Ndiaye",
            current_club="Diambars",
            country="Senegal",
            position="LW",
            birth_year=2008,
            status="active",
            sweep_tier=SweepTier.B,
            rumours=RumourLog([make_rumour()]),
        ),
    ]
    return Roster(players=players, meta=RosterMeta(last_sweep="Feb 1, 2026", sweep_number=4))


def sample_intel() -> IntelStore:
    return IntelStore(entries={"1": {"contract": "2027", "previousClub": "Diambars"}})


def players_file_payload() -> dict[str, object]:
    return {
        "meta": {"lastSweep": "Feb 1, 2026", "sweepNumber": 4, "title": "Youth tracker"},
        "players": [
            {
                "id": 1,
                "name": "Ettienne Mendy",
                "altSpellings": ["Etienne Mendy"],
                "country": "Senegal",
                "position": "CB",
                "birthYear": 2008,
                "currentClub": "Lens",
                "confusionRisk": "Édouard Mendy (b.1992, Al-Ahli)",
                "status": "active",
                "sweepTier": "A",
                "photo": "mendy.png",
                "rumors": [],
            },
            {
                "id": 4,
                "name": "Mor Talla Ndiaye",
                "altSpellings": [],
                "country": "Senegal",
                "position": "LW",
                "birthYear": 2008,
                "currentClub": "Diambars",
                "status": "active",
                "sweepTier": "B",
                "rumors": [
                    {
                        "date": "Feb 8, 2026",
                        "club": "Sporting CP",
                        "detail": "Medical scheduled for loan move",
                        "source": "Record",
                        "tier": 2,
                        "status": "rumour",
                        "recent": True,
                    }
                ],
            },
        ],
    }
