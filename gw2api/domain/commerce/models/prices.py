"""
Trading Post Price Models

Order book listings and aggregated prices.
"""

from typing import ClassVar, List

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class Listing(Gw2Model):
    """One price level of the order book."""
    listings: int
    unit_price: int
    quantity: int


class Listings(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/commerce/listings", id_type=int
    )

    id: int
    buys: List[Listing]
    sells: List[Listing]


class Price(Gw2Model):
    unit_price: int
    quantity: int


class Prices(Gw2Model, ListEndpoint):
    """Best buy and sell offer for an item."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/commerce/prices", id_type=int
    )

    id: int
    whitelisted: bool
    buys: Price
    sells: Price
