"""Two-phase delta producer backed by the Anthropic Messages API.

Phase 1 searches the web for each batch of players and collects free-text
findings. Phase 2 turns all findings into a single JSON delta without tools,
so it always yields text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from youthtracker.adapters.http_resilience import ResilientClient
from youthtracker.config.sweep import SweepConfig
from youthtracker.domain.model import SweepType
from youthtracker.domain.sweep import batch_players

from .client import MessagesClient
from .prompts import SEARCH_SYSTEM_PROMPT, build_delta_prompt, build_search_prompt

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from youthtracker.config.anthropic import AnthropicConfig
    from youthtracker.config.http_resilience import ResilienceConfig
    from youthtracker.domain.model import PlayerRecord
    from youthtracker.domain.ports.producing import DeltaProducer, SweepRequest

log = getLogger(__name__)

WEB_SEARCH_TOOL_TYPE = "web_search_20250305"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def search_budget(batch_size: int, sweep_type: SweepType, config: SweepConfig) -> int:
    """Maximum web searches allowed for one phase-1 call."""

    if sweep_type is SweepType.FLASH:
        return config.flash_searches
    return min(batch_size * config.searches_per_player, config.max_searches)


@dataclass(slots=True)
class AnthropicDeltaProducer:
    config: AnthropicConfig
    sweep: SweepConfig = field(default_factory=SweepConfig)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    # phase-1 findings are written here for debugging when set
    findings_path: Path | None = None
    findings: str = field(default="", init=False)

    async def __call__(
        self,
        players: Sequence[PlayerRecord],
        *,
        request: SweepRequest,
    ) -> str:
        batches = batch_players(players, request.sweep_type, batch_size=self.sweep.batch_size)
        if len(batches) > 1:
            log.info(
                "Splitting into %s batches of up to %s players each",
                len(batches),
                self.sweep.batch_size,
            )

        async with self.client_factory(self.config.resilience) as http:
            messages = MessagesClient(self.config, http)
            sections: list[str] = []
            for index, batch in enumerate(batches, start=1):
                findings = await self._search(messages, batch, request=request, label=index)
                sections.append(f"\n=== Batch {index} findings ===\n{findings}\n")
            self.findings = "".join(sections)
            self._save_findings()
            return await self._produce(messages, players, request=request)

    async def _search(
        self,
        messages: MessagesClient,
        batch: Sequence[PlayerRecord],
        *,
        request: SweepRequest,
        label: int,
    ) -> str:
        max_searches = search_budget(len(batch), request.sweep_type, self.sweep)
        log.info(
            "Phase 1: searching for %s player(s): %s (max searches: %s)",
            len(batch),
            ", ".join(player.name for player in batch),
            max_searches,
        )
        prompt = build_search_prompt(batch, request=request)
        tool = {"type": WEB_SEARCH_TOOL_TYPE, "name": "web_search", "max_uses": max_searches}

        response = await messages.create(prompt=prompt, system=SEARCH_SYSTEM_PROMPT, tools=[tool])
        log.info("Phase 1 batch %s complete: %s searches performed", label, response.search_count)
        log.debug("Phase 1 findings:\n%s", response.text[:3000])
        return response.text

    async def _produce(
        self,
        messages: MessagesClient,
        players: Sequence[PlayerRecord],
        *,
        request: SweepRequest,
    ) -> str:
        log.info("Phase 2: producing structured JSON delta")
        prompt = build_delta_prompt(players, self.findings, request=request)
        response = await messages.create(prompt=prompt)
        if response.stop_reason == "max_tokens":
            log.warning("Phase 2 output hit the token limit; the delta may be truncated")
        log.debug("Phase 2 raw output:\n%s", response.text[:2000])
        return response.text

    def _save_findings(self) -> None:
        if self.findings_path is None:
            return
        self.findings_path.parent.mkdir(parents=True, exist_ok=True)
        self.findings_path.write_text(self.findings, encoding="utf-8")
        log.debug("Phase 1 findings saved to %s", self.findings_path)


if TYPE_CHECKING:
    from youthtracker.config.anthropic import get_anthropic_config

    _producer_check: DeltaProducer = AnthropicDeltaProducer(get_anthropic_config())
