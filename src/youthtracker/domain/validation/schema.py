"""Structural validation of a single rumour candidate."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from youthtracker.domain.model import MAX_SOURCE_TIER, MIN_SOURCE_TIER, IssueKind, RumourRecord

from .contracts import ValidationResult

if TYPE_CHECKING:
    from .contracts import RumourCandidate

# "Feb 8, 2026" or "Mid-Feb 8, 2026". Vague forms such as "Mid-Jan 2026" are refused.
DATE_PATTERN: Final = re.compile(
    r"(?:Mid-)?(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) [0-9]{1,2}, [0-9]{4}"
)
MAX_CLUB_LENGTH: Final = 60
MAX_DETAIL_LENGTH: Final = 100
# what the upstream prompt asks for; not enforced
ADVISORY_DETAIL_LENGTH: Final = 80


def _is_nonblank_string(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _as_tier(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_rumour(rumour: RumourCandidate) -> ValidationResult:
    """Check every field of ``rumour`` and collect all violations."""

    errors: list[str] = []

    date = rumour.get("date")
    if not isinstance(date, str) or not date:
        errors.append("Missing or invalid date")
    elif DATE_PATTERN.fullmatch(date) is None:
        errors.append(f'Date format invalid: "{date}" — expected "Mon DD, YYYY"')

    club = rumour.get("club")
    if not _is_nonblank_string(club):
        errors.append("Missing club name")
    elif isinstance(club, str) and len(club) > MAX_CLUB_LENGTH:
        errors.append(f"Club name too long ({len(club)} chars, max {MAX_CLUB_LENGTH})")

    detail = rumour.get("detail")
    if not _is_nonblank_string(detail):
        errors.append("Missing detail")
    elif isinstance(detail, str) and len(detail) > MAX_DETAIL_LENGTH:
        errors.append(f"Detail too long ({len(detail)} chars, max {MAX_DETAIL_LENGTH})")

    source = rumour.get("source")
    if not isinstance(source, str) or not source:
        errors.append("Missing source")

    raw_tier = rumour.get("tier")
    if raw_tier is None:
        errors.append("Missing tier")
    else:
        tier = _as_tier(raw_tier)
        if tier is None or not MIN_SOURCE_TIER <= tier <= MAX_SOURCE_TIER:
            errors.append(
                f"Invalid tier: {raw_tier!r} — must be {MIN_SOURCE_TIER}-{MAX_SOURCE_TIER}"
            )

    status = rumour.get("status")
    if not isinstance(status, str) or not status:
        errors.append("Missing status")

    if not isinstance(rumour.get("recent"), bool):
        errors.append("Missing or invalid 'recent' boolean")

    return ValidationResult.from_errors(IssueKind.SCHEMA, errors)


def to_rumour_record(rumour: RumourCandidate) -> RumourRecord:
    """Build the stored form of a candidate that passed ``validate_rumour``."""

    result = validate_rumour(rumour)
    if not result.valid:
        raise ValueError(f"Rumour candidate is invalid: {'; '.join(result.errors)}")
    tier = _as_tier(rumour["tier"])
    if tier is None:  # pragma: no cover - guarded by validate_rumour
        raise ValueError("Rumour candidate has no usable tier")
    return RumourRecord(
        date=str(rumour["date"]),
        club=str(rumour["club"]),
        detail=str(rumour["detail"]),
        source=str(rumour["source"]),
        tier=tier,
        status=str(rumour["status"]),
        recent=bool(rumour["recent"]),
    )
