"""
Exchange Model

Gem and coin exchange rates.
"""

from typing import Any, ClassVar

from ....core.models import Endpoint, Gw2Model, ResourceDescriptor


class Exchange(Gw2Model, Endpoint):
    """Exchange rate quote for a given quantity."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/commerce/exchange/{currency}"
    )

    coins_per_gem: int
    quantity: int

    @classmethod
    def _quote(cls, client: Any, currency: str, quantity: int) -> Any:
        request = cls.request().path(currency=currency).query("quantity", quantity).build()
        return cls._send(client, request, cls)

    @classmethod
    def coins(cls, client: Any, coins: int) -> Any:
        """
        Quote how many gems ``coins`` copper buys.

        Args:
            client: A Client or BlockingClient
            coins: Amount of copper to exchange

        Returns:
            Exchange with ``quantity`` in gems
        """
        return cls._quote(client, "coins", coins)

    @classmethod
    def gems(cls, client: Any, gems: int) -> Any:
        """Quote how many coins ``gems`` gems buy."""
        return cls._quote(client, "gems", gems)
