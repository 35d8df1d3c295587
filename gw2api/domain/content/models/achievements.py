"""
Achievement Model

Achievement definitions from /v2/achievements.
"""

from enum import Enum
from typing import Annotated, ClassVar, List, Literal, Optional, Union

from pydantic import Field

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class AchievementKind(str, Enum):
    DEFAULT = "Default"
    ITEM_SET = "ItemSet"


class AchievementTier(Gw2Model):
    count: int
    points: int


class CoinsReward(Gw2Model):
    kind: Literal["Coins"] = Field(alias="type")
    count: int


class ItemReward(Gw2Model):
    kind: Literal["Item"] = Field(alias="type")
    id: int
    count: int


class MasteryReward(Gw2Model):
    kind: Literal["Mastery"] = Field(alias="type")
    id: int
    region: str


class TitleReward(Gw2Model):
    kind: Literal["Title"] = Field(alias="type")
    id: int


AchievementReward = Annotated[
    Union[CoinsReward, ItemReward, MasteryReward, TitleReward],
    Field(discriminator="kind")
]


class TextBit(Gw2Model):
    kind: Literal["Text"] = Field(alias="type")
    text: str


class ItemBit(Gw2Model):
    kind: Literal["Item"] = Field(alias="type")
    id: int


class MinipetBit(Gw2Model):
    kind: Literal["Minipet"] = Field(alias="type")
    id: int


class SkinBit(Gw2Model):
    kind: Literal["Skin"] = Field(alias="type")
    id: int


AchievementBit = Annotated[
    Union[TextBit, ItemBit, MinipetBit, SkinBit],
    Field(discriminator="kind")
]


class Achievement(Gw2Model, ListEndpoint):
    """An achievement. Rewards and bits are tagged by their ``type`` field."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/achievements", localized=True, id_type=int
    )

    id: int
    icon: Optional[str] = None
    name: str
    description: str
    requirement: str
    locked_text: str = ""
    kind: AchievementKind = Field(alias="type")
    flags: List[str]
    tiers: List[AchievementTier]
    prerequisites: List[int] = Field(default_factory=list)
    rewards: List[AchievementReward] = Field(default_factory=list)
    bits: List[AchievementBit] = Field(default_factory=list)
    point_cap: Optional[int] = None

    @property
    def total_points(self) -> int:
        """Points awarded for completing every tier."""
        return sum(tier.points for tier in self.tiers)
