"""
Pydantic models for the canonical JSON contract.

These models are used for:
- The normalized leaderboard handed to the front-end
- The normalized rankings payload
- API response serialization (camelCase aliases match the front-end)
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from .types import SPORT_NAME

Number = Union[int, float]


class _CamelModel(BaseModel):
    """Base model that accepts both field names and camelCase aliases."""

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the front-end (alias) field names."""
        return self.model_dump(by_alias=True)


class PlayerInfo(_CamelModel):
    name: str = ""
    position: str = ""
    class_year: str = Field(default="", alias="classYear")


class TeamInfo(_CamelModel):
    name: str = ""


class LeaderEntry(_CamelModel):
    """Single row of a stat leaderboard."""

    rank: int = Field(ge=1)
    player: PlayerInfo = Field(default_factory=PlayerInfo)
    team: TeamInfo = Field(default_factory=TeamInfo)
    value: Number = 0
    additional_stats: dict[str, Number] = Field(default_factory=dict, alias="additionalStats")


class Leaderboard(_CamelModel):
    """Ranked, capped leaderboard for one stat category."""

    sport: str = SPORT_NAME
    category: str
    updated: str
    leaders: list[LeaderEntry] = Field(default_factory=list)


class RankingsPayload(_CamelModel):
    """Team rankings poll with normalized rows."""

    title: str
    updated: str
    data: list[dict[str, Any]] = Field(default_factory=list)
