from __future__ import annotations

import json

import pytest

from tests.helpers.tracker import make_rumour, rumour_payload
from youthtracker.adapters.delta import delta_report, parse_delta_text
from youthtracker.domain.errors import ParseError
from youthtracker.domain.validation import (
    AcceptedIntel,
    Escalation,
    NeedsReviewItem,
    SweepDelta,
    TierWarning,
    ValidatedDelta,
)


def _delta_text(**overrides: object) -> str:
    payload: dict[str, object] = {
        "sweepDate": "Feb 9, 2026",
        "sweepType": "full",
        "sweepNumber": 5,
        "baselineItems": 1,
        "playersSearched": 4,
        "newIntel": [
            {
                "playerId": 1,
                "playerName": "Ettienne Mendy",
                "rumor": rumour_payload(),
                "intelUpdates": {"contract": "2028"},
                "reasoning": "new",
            }
        ],
        "escalations": [
            {
                "playerId": 2,
                "playerName": "Issouf Dabo",
                "field": "status",
                "oldValue": "monitoring",
                "newValue": "confirmed",
                "source": "Club site",
            }
        ],
        "tierChanges": [
            {
                "playerId": 3,
                "playerName": "Souleymane Faye",
                "oldTier": "C",
                "newTier": "B",
                "reason": "moved abroad",
            }
        ],
        "noChange": ["Mor Talla Ndiaye"],
        "needsReview": [],
    }
    payload.update(overrides)
    return "Sure! Here is the delta:\n" + json.dumps(payload) + "\nDone."


def test_full_delta_is_translated() -> None:
    delta = parse_delta_text(_delta_text())

    assert delta.sweep_number == 5
    assert delta.players_searched == 4
    item = delta.new_intel[0]
    assert item.player_id == 1
    assert item.rumour == rumour_payload()
    assert item.intel_updates == {"contract": "2028"}
    assert item.parse_errors == ()
    assert delta.escalations[0].new_value == "confirmed"
    assert delta.tier_changes[0].new_tier == "B"
    assert delta.no_change == ["Mor Talla Ndiaye"]


def test_british_spelling_of_rumour_is_accepted() -> None:
    text = _delta_text(newIntel=[{"playerId": 1, "rumour": rumour_payload()}])

    assert parse_delta_text(text).new_intel[0].rumour == rumour_payload()


def test_null_sections_become_empty() -> None:
    delta = parse_delta_text(
        '{"newIntel": null, "escalations": null, "tierChanges": null, "sweepNumber": "5"}'
    )

    assert delta.new_intel == []
    assert delta.escalations == []
    assert delta.tier_changes == []
    assert delta.sweep_number is None


def test_malformed_records_carry_parse_errors() -> None:
    text = _delta_text(
        newIntel=[{"playerId": "7", "playerName": "Ghost", "rumor": rumour_payload()}, "junk"],
        escalations=[{"playerId": 2, "playerName": "Issouf Dabo"}],
        tierChanges=[{"playerId": 3}],
    )

    delta = parse_delta_text(text)

    first, second = delta.new_intel
    assert first.player_id == "7"
    assert first.player_name == "Ghost"
    assert first.rumour == rumour_payload()
    assert first.parse_errors
    assert first.parse_errors[0].startswith("playerId:")
    assert second.parse_errors == ("record is not a JSON object",)
    assert delta.escalations[0].parse_errors[0].startswith("newValue:")
    assert delta.tier_changes[0].parse_errors[0].startswith("newTier:")


def test_malformed_review_entries_are_dropped() -> None:
    text = _delta_text(
        needsReview=[
            "junk",
            {"playerId": 4, "playerName": "Mor Talla Ndiaye", "detail": "?", "reason": "?"},
        ]
    )

    assert parse_delta_text(text).needs_review == [
        NeedsReviewItem(player_id=4, player_name="Mor Talla Ndiaye", detail="?", reason="?")
    ]


@pytest.mark.parametrize(
    "text",
    [
        "I could not find anything.",
        "{this is not json}",
        '{"newIntel": "none"}',
    ],
)
def test_unusable_output_is_a_parse_error(text: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_delta_text(text)

    assert excinfo.value.raw_text == text


def test_delta_report_layout() -> None:
    rumour = make_rumour()
    escalation = Escalation(player_id=2, player_name="Issouf Dabo", new_value="confirmed")
    validated = ValidatedDelta(
        source=SweepDelta(sweep_date="Feb 9, 2026", sweep_number=5, no_change=["X"]),
        accepted=[
            AcceptedIntel(player_id=4, player_name="Mor Talla Ndiaye", rumour=rumour)
        ],
        escalations=[escalation],
        warnings=[TierWarning(player_id=4, player_name="Mor Talla Ndiaye", message="hmm")],
    )

    report = delta_report(validated)

    assert report["sweepNumber"] == 5
    assert report["newIntel"] == [
        {
            "playerId": 4,
            "playerName": "Mor Talla Ndiaye",
            "rumor": {
                "date": "Feb 8, 2026",
                "club": "Sporting CP",
                "detail": "Medical scheduled for loan move",
                "source": "Record",
                "tier": 2,
                "status": "rumour",
                "recent": True,
            },
            "intelUpdates": None,
            "reasoning": "",
        }
    ]
    assert report["escalations"] == [
        {
            "playerId": 2,
            "playerName": "Issouf Dabo",
            "field": "status",
            "oldValue": None,
            "newValue": "confirmed",
            "source": "",
        }
    ]
    assert report["tierChanges"] == []
    assert report["noChange"] == ["X"]
    assert report["tierWarnings"] == [
        {"playerId": 4, "playerName": "Mor Talla Ndiaye", "warning": "hmm"}
    ]
    json.dumps(report)
