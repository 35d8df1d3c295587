"""
Account Storage Models

Bank, shared inventory, material storage and legendary armory.
"""

from enum import Enum
from typing import ClassVar, Dict, List, Optional

from ....core.models import Gw2Model, Gw2RootList, ResourceDescriptor, SingleEndpoint
from ._descriptors import account_endpoint


class ItemBinding(str, Enum):
    ACCOUNT = "Account"
    CHARACTER = "Character"


class ItemStats(Gw2Model):
    """Selected stats of an item with selectable attributes."""
    id: int
    attributes: Dict[str, float]


class BankItem(Gw2Model):
    id: int
    count: int
    charges: Optional[int] = None
    skin: Optional[int] = None
    dyes: Optional[List[int]] = None
    upgrades: Optional[List[int]] = None
    upgrade_slot_indices: Optional[List[int]] = None
    infusions: Optional[List[int]] = None
    binding: Optional[ItemBinding] = None
    bound_to: Optional[str] = None
    stats: Optional[ItemStats] = None


class AccountBank(Gw2RootList, SingleEndpoint):
    """Bank slots in order. Empty slots are None."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("bank")

    root: List[Optional[BankItem]]


class InventoryItem(Gw2Model):
    id: int
    count: int
    charges: Optional[int] = None
    skin: Optional[int] = None
    upgrades: Optional[List[int]] = None
    infusions: Optional[List[int]] = None
    binding: ItemBinding


class AccountInventory(Gw2RootList, SingleEndpoint):
    """Shared inventory slots. Empty slots are None."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("inventory")

    root: List[Optional[InventoryItem]]


class LegendaryArmoryItem(Gw2Model):
    id: int
    count: int


class AccountLegendaryArmory(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("legendaryarmory")

    root: List[LegendaryArmoryItem]


class MaterialItem(Gw2Model):
    id: int
    category: int
    binding: Optional[ItemBinding] = None
    count: int


class AccountMaterials(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("materials")

    root: List[MaterialItem]
