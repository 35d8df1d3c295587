"""
WvW Upgrade Models

Objective upgrade tiers.
"""

from typing import ClassVar, List

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class UpgradeEffect(Gw2Model):
    name: str
    description: str
    icon: str


class UpgradeTier(Gw2Model):
    name: str
    yaks_required: int
    upgrades: List[UpgradeEffect]


class Upgrade(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/wvw/upgrades", localized=True, id_type=int, supports_all=True
    )

    id: int
    tiers: List[UpgradeTier]
