"""Canonical forms of player and club names used for comparisons."""

from __future__ import annotations

import re
import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from youthtracker.domain.model import ClubRegistry

_CLUB_AFFIXES = (
    re.compile(r"^fc\s+", re.IGNORECASE),
    re.compile(r"\s+fc$", re.IGNORECASE),
    re.compile(r"^ac\s+", re.IGNORECASE),
    re.compile(r"\s+ac$", re.IGNORECASE),
)


def normalize_name(value: str) -> str:
    """Lowercase, strip diacritics and trim. Idempotent."""

    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.strip()


def normalize_club(value: str, registry: ClubRegistry) -> str:
    """Map a club name onto its canonical lowercase form.

    Registry aliases win; otherwise a leading or trailing ``FC``/``AC`` token
    is dropped.
    """

    canonical = registry.canonical_for(value)
    if canonical is not None:
        return canonical.lower()

    lowered = value.lower()
    for affix in _CLUB_AFFIXES:
        lowered = affix.sub("", lowered, count=1)
    return lowered.strip()
