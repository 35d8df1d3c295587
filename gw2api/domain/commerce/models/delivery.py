"""
Delivery Model

Coins and items waiting for pickup at the trading post.
"""

from typing import ClassVar, List

from ....core.models import Authentication, Gw2Model, ResourceDescriptor, SingleEndpoint


class DeliveryItem(Gw2Model):
    id: int
    count: int


class Delivery(Gw2Model, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/commerce/delivery", authentication=Authentication.REQUIRED
    )

    coins: int
    items: List[DeliveryItem]
