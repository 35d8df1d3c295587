"""
Account Domain Models

Authenticated /v2/account endpoints and /v2/tokeninfo.
"""

from .account import Account, AccountAccess, AccessFlag
from .progress import (
    AccountAchievement,
    AccountAchievements,
    AccountDailyCrafting,
    AccountDungeons,
    AccountLuck,
    AccountMapChests,
    AccountMastery,
    AccountMasteries,
    AccountMasteryPoints,
    MasteryRegionPoints,
    AccountProgression,
    ProgressionEntry,
    AccountRaids,
    AccountWallet,
    WalletEntry,
    AccountWorldBosses,
)
from .storage import (
    ItemBinding,
    ItemStats,
    BankItem,
    AccountBank,
    InventoryItem,
    AccountInventory,
    LegendaryArmoryItem,
    AccountLegendaryArmory,
    MaterialItem,
    AccountMaterials,
)
from .unlocks import (
    AccountDyes,
    AccountFinisher,
    AccountFinishers,
    AccountGliders,
    AccountHomeCats,
    AccountHomeNodes,
    AccountMailCarriers,
    AccountMinis,
    AccountMountSkins,
    AccountMountTypes,
    AccountNovelties,
    AccountOutfits,
    AccountPvPHeroes,
    AccountRecipes,
    AccountSkins,
    AccountTitles,
)
from .tokeninfo import TokenInfo, TokenKind, TokenPermission

__all__ = [
    "Account",
    "AccountAccess",
    "AccessFlag",
    "AccountAchievement",
    "AccountAchievements",
    "AccountDailyCrafting",
    "AccountDungeons",
    "AccountLuck",
    "AccountMapChests",
    "AccountMastery",
    "AccountMasteries",
    "AccountMasteryPoints",
    "MasteryRegionPoints",
    "AccountProgression",
    "ProgressionEntry",
    "AccountRaids",
    "AccountWallet",
    "WalletEntry",
    "AccountWorldBosses",
    "ItemBinding",
    "ItemStats",
    "BankItem",
    "AccountBank",
    "InventoryItem",
    "AccountInventory",
    "LegendaryArmoryItem",
    "AccountLegendaryArmory",
    "MaterialItem",
    "AccountMaterials",
    "AccountDyes",
    "AccountFinisher",
    "AccountFinishers",
    "AccountGliders",
    "AccountHomeCats",
    "AccountHomeNodes",
    "AccountMailCarriers",
    "AccountMinis",
    "AccountMountSkins",
    "AccountMountTypes",
    "AccountNovelties",
    "AccountOutfits",
    "AccountPvPHeroes",
    "AccountRecipes",
    "AccountSkins",
    "AccountTitles",
    "TokenInfo",
    "TokenKind",
    "TokenPermission",
]
