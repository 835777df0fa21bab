from __future__ import annotations

import pytest

from tests.helpers.tracker import rumour_payload
from youthtracker.domain.model import SPECULATIVE_SOURCE_TIER, IssueKind
from youthtracker.domain.validation import check_tier_consistency


def test_reliable_source_with_low_tier_warns() -> None:
    result = check_tier_consistency(rumour_payload(source="Fabrizio Romano", tier=3))

    assert result.kind is IssueKind.TIER
    assert result.errors == ('Source "Fabrizio Romano" appears to be T1/T2 but labeled Tier 3',)


def test_speculative_source_with_top_tier_warns() -> None:
    result = check_tier_consistency(rumour_payload(source="Fan blog", tier=1))

    assert result.errors == ('Source "Fan blog" appears speculative but labeled Tier 1',)


def test_strong_outlet_with_bottom_tier_warns() -> None:
    result = check_tier_consistency(rumour_payload(source="ESPN", tier=4))

    assert result.errors == ('Source "ESPN" is a known reliable source but labeled Tier 4',)


@pytest.mark.parametrize(
    ("source", "tier"),
    [("ESPN", 2), ("Transfermarkt", 1), ("Local radio", 3), ("Fan blog", 4)],
)
def test_consistent_labels_do_not_warn(source: str, tier: int) -> None:
    assert check_tier_consistency(rumour_payload(source=source, tier=tier)).valid


def test_non_numeric_tier_is_left_to_schema_validation() -> None:
    assert check_tier_consistency(rumour_payload(source="Official", tier="high")).valid


def test_reliable_source_warns_from_the_speculative_tier_on() -> None:
    below = rumour_payload(source="Official club site", tier=SPECULATIVE_SOURCE_TIER - 1)
    at = rumour_payload(source="Official club site", tier=SPECULATIVE_SOURCE_TIER)

    assert check_tier_consistency(below).valid
    assert not check_tier_consistency(at).valid
