"""
Content Domain Models

Static game content: achievements, colors, currencies, worlds and similar.
"""

from .achievements import (
    Achievement,
    AchievementKind,
    AchievementTier,
    AchievementReward,
    CoinsReward,
    ItemReward,
    MasteryReward,
    TitleReward,
    AchievementBit,
    TextBit,
    ItemBit,
    MinipetBit,
    SkinBit,
)
from .build import Build
from .colors import Color, ArmorColor
from .currencies import Currency
from .dungeons import Dungeon, DungeonPath, DungeonKind
from .files import File
from .minis import Mini
from .novelties import Novelty, NoveltySlot
from .quaggans import Quaggan
from .raids import Raid, RaidWing, RaidEvent, RaidEventKind
from .titles import Title
from .worlds import World, Population

__all__ = [
    "Achievement",
    "AchievementKind",
    "AchievementTier",
    "AchievementReward",
    "CoinsReward",
    "ItemReward",
    "MasteryReward",
    "TitleReward",
    "AchievementBit",
    "TextBit",
    "ItemBit",
    "MinipetBit",
    "SkinBit",
    "Build",
    "Color",
    "ArmorColor",
    "Currency",
    "Dungeon",
    "DungeonPath",
    "DungeonKind",
    "File",
    "Mini",
    "Novelty",
    "NoveltySlot",
    "Quaggan",
    "Raid",
    "RaidWing",
    "RaidEvent",
    "RaidEventKind",
    "Title",
    "World",
    "Population",
]
