"""Detection of candidates that restate a player's existing history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .normalize import normalize_club

if TYPE_CHECKING:
    from collections.abc import Iterable

    from youthtracker.domain.model import ClubRegistry, RumourRecord

# strictly greater than: an overlap of exactly 0.6 is a new claim
OVERLAP_THRESHOLD: Final = 0.6
MIN_TOKEN_LENGTH: Final = 3


def significant_tokens(text: str) -> frozenset[str]:
    """Lowercase whitespace-separated words longer than two characters."""

    return frozenset(word for word in text.lower().split() if len(word) >= MIN_TOKEN_LENGTH)


def token_overlap_ratio(first: str, second: str) -> float:
    """Shared significant words divided by the larger of the two word sets."""

    first_tokens = significant_tokens(first)
    second_tokens = significant_tokens(second)
    largest = max(len(first_tokens), len(second_tokens))
    if largest == 0:
        return 0.0
    return len(first_tokens & second_tokens) / largest


def is_duplicate(
    candidate: RumourRecord,
    history: Iterable[RumourRecord],
    registry: ClubRegistry,
) -> bool:
    """Return whether ``candidate`` restates any record of ``history``."""

    candidate_club = normalize_club(candidate.club, registry)
    for existing in history:
        if (
            existing.date == candidate.date
            and existing.club == candidate.club
            and existing.detail == candidate.detail
        ):
            return True
        if existing.date != candidate.date:
            continue
        if normalize_club(existing.club, registry) != candidate_club:
            continue
        if token_overlap_ratio(candidate.detail, existing.detail) > OVERLAP_THRESHOLD:
            return True
    return False
