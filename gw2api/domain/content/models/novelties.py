"""
Novelty Model
"""

from enum import Enum
from typing import ClassVar, List

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class NoveltySlot(str, Enum):
    CHAIR = "Chair"
    MUSIC = "Music"
    HELD_ITEM = "HeldItem"
    MISCELLANEOUS = "Miscellaneous"
    TONIC = "Tonic"


class Novelty(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/novelties", localized=True, id_type=int, supports_all=True
    )

    id: int
    name: str
    description: str
    icon: str
    slot: NoveltySlot
    unlock_item: List[int]
