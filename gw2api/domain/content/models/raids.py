"""
Raid Model

Raid wings and their events from /v2/raids.
"""

from enum import Enum
from typing import ClassVar, List

from pydantic import Field

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class RaidEventKind(str, Enum):
    CHECKPOINT = "Checkpoint"
    BOSS = "Boss"


class RaidEvent(Gw2Model):
    id: str
    kind: RaidEventKind = Field(alias="type")


class RaidWing(Gw2Model):
    id: str
    events: List[RaidEvent]


class Raid(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/raids", id_type=str, supports_all=True
    )

    id: str
    wings: List[RaidWing] = Field(default_factory=list)
