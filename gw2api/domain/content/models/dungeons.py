"""
Dungeon Model
"""

from enum import Enum
from typing import ClassVar, List

from pydantic import Field

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class DungeonKind(str, Enum):
    STORY = "Story"
    EXPLORABLE = "Explorable"


class DungeonPath(Gw2Model):
    id: str
    kind: DungeonKind = Field(alias="type")


class Dungeon(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/dungeons", id_type=str, supports_all=True
    )

    id: str
    paths: List[DungeonPath]
