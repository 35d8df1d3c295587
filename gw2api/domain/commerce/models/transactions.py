"""
Transaction Models

Open orders and order history of the authenticated account.
"""

from datetime import datetime
from typing import Any, ClassVar, List

from ....core.models import (
    Authentication,
    Endpoint,
    Gw2Model,
    Gw2RootList,
    ResourceDescriptor,
)


class CurrentTransaction(Gw2Model):
    id: int
    item_id: int
    price: int
    quantity: int
    created: datetime


class HistoryTransaction(Gw2Model):
    id: int
    item_id: int
    price: int
    quantity: int
    created: datetime
    purchased: datetime


class _TransactionList(Gw2RootList, Endpoint):
    """Shared buys/sells accessors. The descriptor path takes a ``side``."""

    @classmethod
    def buys(cls, client: Any) -> Any:
        """Fetch buy orders."""
        return cls._send(client, cls.request().path(side="buys").build(), cls)

    @classmethod
    def sells(cls, client: Any) -> Any:
        """Fetch sell orders."""
        return cls._send(client, cls.request().path(side="sells").build(), cls)


class CurrentTransactions(_TransactionList):
    """Unfulfilled orders."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/commerce/transactions/current/{side}",
        authentication=Authentication.REQUIRED
    )

    root: List[CurrentTransaction]


class HistoryTransactions(_TransactionList):
    """Orders fulfilled in the past 90 days."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/commerce/transactions/history/{side}",
        authentication=Authentication.REQUIRED
    )

    root: List[HistoryTransaction]
