"""Delta producer that replays raw upstream output stored in a file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from youthtracker.domain.errors import UpstreamError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from youthtracker.domain.model import PlayerRecord
    from youthtracker.domain.ports.producing import DeltaProducer, SweepRequest


@dataclass(frozen=True, slots=True)
class FileDeltaProducer:
    path: Path

    async def __call__(
        self,
        players: Sequence[PlayerRecord],  # noqa: ARG002
        *,
        request: SweepRequest,  # noqa: ARG002
    ) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise UpstreamError(f"Cannot read delta file {self.path}: {exc}") from exc


if TYPE_CHECKING:
    _producer_check: DeltaProducer = FileDeltaProducer(Path("delta.json"))
