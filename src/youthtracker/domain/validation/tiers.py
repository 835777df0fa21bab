"""Advisory plausibility check of the source tier assigned to a rumour."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from youthtracker.domain.model import (
    MAX_SOURCE_TIER,
    MIN_SOURCE_TIER,
    SPECULATIVE_SOURCE_TIER,
    IssueKind,
)

from .contracts import ValidationResult

if TYPE_CHECKING:
    from .contracts import RumourCandidate

RELIABLE_SOURCE_MARKERS: Final = (
    "official",
    "club site",
    "transfermarkt",
    "romano",
    "ornstein",
    "moretto",
)
STRONG_OUTLET_MARKERS: Final = (
    "africafoot",
    "africa top sports",
    "foot africa",
    "panafricafootball",
    "teamtalk",
    "the athletic",
    "espn",
    "sky",
    "l'équipe",
    "l'equipe",
    "bold.dk",
    "gazzetta",
)
SPECULATIVE_SOURCE_MARKERS: Final = ("fan blog", "unverified", "tabloid", "rumour mill")


def _mentions(source: str, markers: tuple[str, ...]) -> bool:
    return any(marker in source for marker in markers)


def check_tier_consistency(rumour: RumourCandidate) -> ValidationResult:
    """Warn when the ``source`` wording disagrees with the labelled ``tier``.

    The result is never blocking; callers log it and move on.
    """

    warnings: list[str] = []
    raw_source = rumour.get("source")
    source_text = raw_source if isinstance(raw_source, str) else ""
    source = source_text.lower()
    tier = rumour.get("tier")
    if isinstance(tier, bool) or not isinstance(tier, int | float):
        return ValidationResult(kind=IssueKind.TIER)

    if _mentions(source, RELIABLE_SOURCE_MARKERS) and tier >= SPECULATIVE_SOURCE_TIER:
        warnings.append(f'Source "{source_text}" appears to be T1/T2 but labeled Tier {tier}')
    if _mentions(source, SPECULATIVE_SOURCE_MARKERS) and tier == MIN_SOURCE_TIER:
        warnings.append(f'Source "{source_text}" appears speculative but labeled Tier 1')
    if _mentions(source, STRONG_OUTLET_MARKERS) and tier == MAX_SOURCE_TIER:
        warnings.append(f'Source "{source_text}" is a known reliable source but labeled Tier 4')

    return ValidationResult.from_errors(IssueKind.TIER, warnings)
