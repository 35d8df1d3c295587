"""
Guild Domain Models
"""

from .guild import Guild, GuildEmblem, GuildEmblemFlag, GuildEmblemSection
from .members import GuildMember, GuildMembers, GuildRank, GuildRanks

__all__ = [
    "Guild",
    "GuildEmblem",
    "GuildEmblemFlag",
    "GuildEmblemSection",
    "GuildMember",
    "GuildMembers",
    "GuildRank",
    "GuildRanks",
]
