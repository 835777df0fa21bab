"""Pydantic models describing the on-disk roster, intel and club files.

Unknown keys are kept (``extra="allow"``) so that a load/save round trip
never drops fields this package does not interpret.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


def _none_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _none_to_empty_str(value: object) -> object:
    return "" if value is None else value


class StoreBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RumourPayload(StoreBaseModel):
    date: str
    club: str
    detail: str
    source: str = ""
    tier: int
    status: str = ""
    recent: bool = False

    _normalize_strings = field_validator("source", "status", mode="before")(_none_to_empty_str)


class PlayerPayload(StoreBaseModel):
    id: StrictInt
    name: str
    current_club: str = Field(alias="currentClub")
    country: str = ""
    position: str = ""
    birth_year: int | None = Field(default=None, alias="birthYear")
    alt_spellings: list[str] = Field(default_factory=list, alias="altSpellings")
    confusion_risk: str | None = Field(default=None, alias="confusionRisk")
    status: str = ""
    sweep_tier: str | None = Field(default=None, alias="sweepTier")
    rumors: list[RumourPayload] = Field(default_factory=list)

    _normalize_lists = field_validator("alt_spellings", "rumors", mode="before")(
        _none_to_empty_list
    )
    _normalize_strings = field_validator("country", "position", "status", mode="before")(
        _none_to_empty_str
    )


class MetaPayload(StoreBaseModel):
    last_sweep: str | None = Field(default=None, alias="lastSweep")
    sweep_number: int = Field(default=0, alias="sweepNumber")


class PlayersFile(StoreBaseModel):
    meta: MetaPayload = Field(default_factory=MetaPayload)
    players: list[PlayerPayload] = Field(default_factory=list)


class ClubsFile(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    aliases: dict[str, list[str]] = Field(default_factory=dict)
    academy_pipelines: dict[str, object] = Field(default_factory=dict, alias="academyPipelines")

    @field_validator("aliases", "academy_pipelines", mode="before")
    @classmethod
    def _none_to_empty_dict(cls, value: object) -> object:
        return {} if value is None else value
