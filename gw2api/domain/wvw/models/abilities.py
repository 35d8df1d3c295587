"""
WvW Ability Model
"""

from typing import ClassVar, List

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class AbilityRank(Gw2Model):
    cost: int
    effect: str


class Ability(Gw2Model, ListEndpoint):
    """A World versus World mastery ability."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/wvw/abilities", localized=True, id_type=int, supports_all=True
    )

    id: int
    name: str
    description: str
    icon: str
    ranks: List[AbilityRank]
