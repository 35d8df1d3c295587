"""
WvW Domain Models

World versus World abilities, matches, ranks and upgrades.
"""

from .abilities import Ability, AbilityRank
from .matches import Match, MatchMap, MapBonus, MapScore, Objective, Skirmish
from .ranks import Rank
from .upgrades import Upgrade, UpgradeEffect, UpgradeTier

__all__ = [
    "Ability",
    "AbilityRank",
    "Match",
    "MatchMap",
    "MapBonus",
    "MapScore",
    "Objective",
    "Skirmish",
    "Rank",
    "Upgrade",
    "UpgradeEffect",
    "UpgradeTier",
]
