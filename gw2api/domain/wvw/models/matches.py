"""
WvW Match Models

Match state with scores per team color ("red", "green", "blue").
"""

from datetime import datetime
from typing import ClassVar, Dict, List, Optional

from pydantic import Field

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class MapScore(Gw2Model):
    kind: str = Field(alias="type")
    scores: Dict[str, int]


class Skirmish(Gw2Model):
    id: int
    scores: Dict[str, int]
    map_scores: List[MapScore]


class MapBonus(Gw2Model):
    kind: str = Field(alias="type")
    owner: str


class Objective(Gw2Model):
    id: str
    kind: str = Field(alias="type")
    owner: str
    last_flipped: Optional[datetime] = None
    claimed_by: Optional[str] = None
    claimed_at: Optional[datetime] = None
    points_tick: int = 0
    points_capture: int = 0
    yaks_delivered: Optional[int] = None
    guild_upgrades: List[int] = Field(default_factory=list)


class MatchMap(Gw2Model):
    id: int
    kind: str = Field(alias="type")
    scores: Dict[str, int]
    bonuses: List[MapBonus]
    objectives: List[Objective]
    deaths: Dict[str, int]
    kills: Dict[str, int]


class Match(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/wvw/matches", id_type=str, supports_all=True
    )

    id: str
    start_time: datetime
    end_time: datetime
    scores: Dict[str, int]
    worlds: Dict[str, int]
    all_worlds: Dict[str, List[int]]
    deaths: Dict[str, int]
    kills: Dict[str, int]
    victory_points: Dict[str, int]
    skirmishes: List[Skirmish]
    maps: List[MatchMap]

    def leader(self) -> str:
        """Team color with the most victory points."""
        return max(self.victory_points, key=self.victory_points.get)
