"""Identity checks: is a candidate really about the player it names?

The upstream research step regularly mixes up players that share a name,
or attaches a different prospect's club and academy to the tracked player.
Every check here is substring based and additive: all findings are
collected, and a candidate is identity-valid only when none fire.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from youthtracker.domain.model import IssueKind

from .contracts import ValidationResult
from .normalize import normalize_name

if TYPE_CHECKING:
    from youthtracker.domain.model import ClubRegistry, PlayerRecord, Roster

    from .contracts import CandidateDeltaItem

# shorter club names ("Ajax" passes, "PSG" does not) produce too many accidental hits
MIN_CONTAMINATION_CLUB_LENGTH: Final = 4

# "Souleymane Faye (b.2003, Sporting CP)" -> "Sporting CP"
_CONFUSION_CLUB: Final = re.compile(r",\s*(.+?)\)")
# "Right to Dream", "Diambars de Saly", ...
_CONNECTOR_PHRASE: Final = re.compile(r"\b[A-Z][a-z]+ (?:to|of|du|de) [A-Z][a-z]+\b")


def validate_player_identity(
    item: CandidateDeltaItem,
    roster: Roster,
    registry: ClubRegistry,
) -> ValidationResult:
    """Run every identity check for ``item`` against ``roster``."""

    player = roster.get(item.player_id)
    if player is None:
        return ValidationResult.from_errors(
            IssueKind.IDENTITY,
            [f"Player ID {item.player_id} not found in master list"],
        )

    errors: list[str] = []
    errors.extend(_name_errors(item, player))

    detail = item.detail
    if detail:
        lowered = detail.lower()
        errors.extend(_cross_contamination_errors(lowered, player, roster))
        errors.extend(_academy_pipeline_errors(lowered, player, registry))
        errors.extend(_confusion_risk_errors(lowered, player))

    return ValidationResult.from_errors(IssueKind.IDENTITY, errors)


def _name_errors(item: CandidateDeltaItem, player: PlayerRecord) -> list[str]:
    if not item.player_name:
        return []
    claimed = normalize_name(item.player_name)
    if any(normalize_name(known) == claimed for known in player.all_names):
        return []
    return [
        f'Name mismatch: API returned "{item.player_name}" '
        f'but ID {player.id} is "{player.name}"'
    ]


def _cross_contamination_errors(
    detail: str,
    player: PlayerRecord,
    roster: Roster,
) -> list[str]:
    errors: list[str] = []
    own_club = player.current_club.lower()
    for other in roster:
        if other.id == player.id:
            continue
        other_club = other.current_club.lower()
        if len(other_club) < MIN_CONTAMINATION_CLUB_LENGTH or other_club == own_club:
            continue
        if other_club in detail:
            errors.append(
                f'Detail mentions "{other.current_club}" which is {other.name}\'s club '
                f"(ID {other.id}), not {player.name}'s"
            )
    return errors


def _academy_pipeline_errors(
    detail: str,
    player: PlayerRecord,
    registry: ClubRegistry,
) -> list[str]:
    errors: list[str] = []
    own_club = player.current_club.lower()
    for academy, destination in registry.academy_pipelines.items():
        academy_lower = academy.lower()
        if academy_lower not in detail:
            continue
        if academy_lower in own_club or destination.lower() in own_club:
            continue
        errors.append(
            f'Detail references "{academy}" pipeline — {player.name} plays for '
            f"{player.current_club}, not associated with {academy}"
        )
    return errors


def _confusion_risk_errors(detail: str, player: PlayerRecord) -> list[str]:
    risk = player.confusion_risk
    if not risk:
        return []

    errors: list[str] = []
    club_match = _CONFUSION_CLUB.search(risk)
    if club_match is not None:
        confused_club = club_match.group(1)
        if confused_club.lower() in detail:
            errors.append(f'Detail mentions "{confused_club}" from confusion risk: {risk}')

    own_club = player.current_club.lower()
    for phrase in _CONNECTOR_PHRASE.findall(risk):
        phrase_lower = phrase.lower()
        if phrase_lower in detail and phrase_lower not in own_club:
            errors.append(
                f'Detail references "{phrase}" mentioned in confusionRisk for {player.name}'
            )
    return errors
