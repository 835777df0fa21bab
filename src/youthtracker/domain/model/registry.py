"""Club alias and academy pipeline registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def _frozen_aliases(aliases: Mapping[str, Iterable[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({canonical: tuple(forms) for canonical, forms in aliases.items()})


@dataclass(frozen=True, slots=True)
class ClubRegistry:
    """Immutable club configuration shared by every validator of a run.

    ``aliases`` maps a canonical club name to its alternative spellings;
    ``academy_pipelines`` maps a youth academy to the senior club it feeds.
    """

    aliases: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    academy_pipelines: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(
        cls,
        *,
        aliases: Mapping[str, Iterable[str]] | None = None,
        academy_pipelines: Mapping[str, str] | None = None,
    ) -> ClubRegistry:
        return cls(
            aliases=_frozen_aliases(aliases or {}),
            academy_pipelines=MappingProxyType(dict(academy_pipelines or {})),
        )

    @classmethod
    def empty(cls) -> ClubRegistry:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.aliases and not self.academy_pipelines

    def canonical_for(self, club: str) -> str | None:
        """Return the canonical name whose name or aliases match ``club`` case-insensitively."""

        lowered = club.lower()
        for canonical, forms in self.aliases.items():
            if lowered == canonical.lower() or any(lowered == form.lower() for form in forms):
                return canonical
        return None
