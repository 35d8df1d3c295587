"""
Commerce Domain Models

Trading post, gem exchange and deliveries.
"""

from .delivery import Delivery, DeliveryItem
from .exchange import Exchange
from .prices import Listing, Listings, Price, Prices
from .transactions import (
    CurrentTransaction,
    CurrentTransactions,
    HistoryTransaction,
    HistoryTransactions,
)

__all__ = [
    "Delivery",
    "DeliveryItem",
    "Exchange",
    "Listing",
    "Listings",
    "Price",
    "Prices",
    "CurrentTransaction",
    "CurrentTransactions",
    "HistoryTransaction",
    "HistoryTransactions",
]
