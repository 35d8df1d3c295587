"""
Guild Roster Models

Members and ranks of a guild. Both require a guild leader's token.
"""

from datetime import datetime
from typing import Any, ClassVar, List, Optional

from ....core.models import (
    Authentication,
    Endpoint,
    Gw2Model,
    Gw2RootList,
    ResourceDescriptor,
)


class GuildMember(Gw2Model):
    name: str
    rank: str
    joined: Optional[datetime] = None


class GuildRank(Gw2Model):
    id: str
    order: int
    permissions: List[str]
    icon: str


class _GuildRoster(Gw2RootList, Endpoint):
    """Roster endpoints addressed by guild id in the path."""

    @classmethod
    def get(cls, client: Any, guild_id: str) -> Any:
        return cls._send(client, cls.request().path(guild_id=guild_id).build(), cls)


class GuildMembers(_GuildRoster):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/guild/{guild_id}/members", authentication=Authentication.REQUIRED
    )

    root: List[GuildMember]


class GuildRanks(_GuildRoster):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/guild/{guild_id}/ranks", authentication=Authentication.REQUIRED
    )

    root: List[GuildRank]
