"""Prompt text for the search and formatting phases of a sweep."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from youthtracker.domain.model import IntelStore, PlayerRecord
    from youthtracker.domain.ports.producing import SweepRequest

SEARCH_SYSTEM_PROMPT = (
    "You are a football transfer research agent. Search for transfer news and report "
    "findings concisely. Do NOT produce JSON — just describe what you found for each player."
)

_MISSING = "—"


def _or_missing(value: object) -> str:
    if value is None or value == "":
        return _MISSING
    return str(value)


def build_player_details(players: Sequence[PlayerRecord], intel: IntelStore) -> str:
    """Describe each player, their intel and their existing rumours."""

    blocks: list[str] = []
    for player in players:
        entry = intel.get(player.id) or {}
        rumours = (
            "\n".join(
                f"  [{r.date}] {r.club} — {r.detail} ({r.source}, T{r.tier})"
                for r in player.rumours
            )
            or "  none"
        )
        tier = player.sweep_tier.value if player.sweep_tier is not None else None
        blocks.append(
            f"--- Player #{player.id}: {player.name} ---\n"
            f"Country: {_or_missing(player.country)} | Position: {_or_missing(player.position)}"
            f" | Born: {_or_missing(player.birth_year)}\n"
            f"Current Club: {player.current_club} | Status: {_or_missing(player.status)}"
            f" | Tier: {_or_missing(tier)}\n"
            f"Alt Spellings: {', '.join(player.alt_spellings) or 'none'}\n"
            f"Confusion Risk: {player.confusion_risk or 'none'}\n"
            f"Contract: {_or_missing(entry.get('contract'))}"
            f" | Previous Club: {_or_missing(entry.get('previousClub'))}\n"
            f"Existing Rumors ({len(player.rumours)}):\n"
            f"{rumours}"
        )
    return "\n\n".join(blocks)


def build_confusion_risks(players: Sequence[PlayerRecord]) -> str:
    lines = [
        f"- {player.name} (b.{_or_missing(player.birth_year)}) vs {player.confusion_risk}"
        for player in players
        if player.confusion_risk
    ]
    return "\n".join(lines) or "- none recorded"


def build_search_prompt(
    players: Sequence[PlayerRecord],
    *,
    request: SweepRequest,
) -> str:
    return f"""You are a football transfer research assistant. Search for the latest transfer news and rumours for these players. Today is {request.sweep_date}.

For EACH player below, run 3-5 web searches using their name + "transfer", their name + club, and French variants for francophone players.

IMPORTANT:
- Search ALL players listed — do not skip any
- For each search result, note the DATE, SOURCE, and KEY CLAIM
- Be careful about identity: check birth year and nationality match
- Only note genuinely new findings (not already in their existing rumors)
- Keep your text output brief — just list findings per player

PLAYERS TO SEARCH:
{build_player_details(players, request.intel)}

Search each player now. For each, write a brief summary of what you found (or "No new intel found")."""  # noqa: E501


def build_delta_prompt(
    players: Sequence[PlayerRecord],
    findings: str,
    *,
    request: SweepRequest,
) -> str:
    return f"""You are the JSON formatter for the youth transfer tracker. Based on the research findings below, produce the structured delta JSON.

TODAY'S DATE: {request.sweep_date}

## RULES
1. Only include genuinely NEW intel not already in the player's existing rumors
2. Apply date gating: ignore anything on or before each player's latest rumour date
3. Verify identity: check birth year, club, nationality match our player
4. Max 80 chars for "detail" field. Lead with the most important fact.
5. Dates: "Feb 8, 2026" format. Never "Recently".
6. Source tiers: T1 (Official/Romano/Transfermarkt), T2 (AfricaFoot/ESPN/Athletic), T3 (Regional), T4 (Speculative)

## KNOWN CONFUSION RISKS
{build_confusion_risks(players)}

## CURRENT PLAYER DATA
{build_player_details(players, request.intel)}

## RESEARCH FINDINGS FROM WEB SEARCH
{findings}

## OUTPUT
Return ONLY a valid JSON object with this exact structure (no markdown fences, no commentary):
{{
  "sweepDate": "{request.sweep_date}",
  "sweepType": "{request.sweep_type.value}",
  "sweepNumber": {request.sweep_number},
  "baselineItems": {request.baseline_items},
  "playersSearched": {len(players)},
  "newIntel": [
    {{
      "playerId": <number>,
      "playerName": "<string>",
      "rumor": {{
        "date": "<Mon DD, YYYY>",
        "club": "<club name>",
        "detail": "<max 80 chars>",
        "source": "<source name>",
        "tier": <1-4>,
        "status": "<rumour|advanced|confirmed|official>",
        "recent": true
      }},
      "intelUpdates": {{ <fields to update in the intel store, or null> }},
      "reasoning": "<why this passed the delta test>"
    }}
  ],
  "escalations": [
    {{
      "playerId": <number>,
      "playerName": "<string>",
      "field": "status",
      "oldValue": "<previous status>",
      "newValue": "<new status>",
      "source": "<source>"
    }}
  ],
  "tierChanges": [],
  "noChange": [<names of players with no new intel>],
  "needsReview": [
    {{
      "playerId": <number>,
      "playerName": "<string>",
      "detail": "<what was found>",
      "reason": "<why uncertain>"
    }}
  ]
}}

If no new intel was found for any player, return empty arrays and list all names in noChange.
Return ONLY the JSON — nothing else."""  # noqa: E501
