"""
Guild Models

Guild details and name search.
"""

from enum import Enum
from typing import Any, ClassVar, List, Optional

from ....core.models import (
    Authentication,
    Endpoint,
    Gw2Model,
    RequestBuilder,
    ResourceDescriptor,
)


class GuildEmblemFlag(str, Enum):
    FLIP_BACKGROUND_HORIZONTAL = "FlipBackgroundHorizontal"
    FLIP_BACKGROUND_VERTICAL = "FlipBackgroundVertical"
    FLIP_FOREGROUND_HORIZONTAL = "FlipForegroundHorizontal"
    FLIP_FOREGROUND_VERTICAL = "FlipForegroundVertical"


class GuildEmblemSection(Gw2Model):
    id: int
    colors: List[int]


class GuildEmblem(Gw2Model):
    background: GuildEmblemSection
    foreground: GuildEmblemSection
    flags: List[GuildEmblemFlag]


class Guild(Gw2Model, Endpoint):
    """
    A guild.

    The detail fields (``level``, ``motd``, ``influence`` and the rest) are
    only present when the access token belongs to a guild leader.
    """

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/guild/{guild_id}", authentication=Authentication.OPTIONAL
    )
    search_descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/guild/search"
    )

    id: str
    name: str
    tag: str
    emblem: Optional[GuildEmblem] = None
    level: Optional[int] = None
    motd: Optional[str] = None
    influence: Optional[int] = None
    aetherium: Optional[int] = None
    favor: Optional[int] = None
    member_count: Optional[int] = None
    member_capacity: Optional[int] = None

    @classmethod
    def get(cls, client: Any, guild_id: str) -> Any:
        """
        Fetch a guild by id.

        Args:
            client: A Client or BlockingClient
            guild_id: Guild id

        Returns:
            Guild, with details when the token belongs to its leader
        """
        return cls._send(client, cls.request().path(guild_id=guild_id).build(), cls)

    @classmethod
    def search(cls, client: Any, name: str) -> Any:
        """Find guild ids by exact guild name."""
        request = RequestBuilder(cls.search_descriptor).query("name", name).build()
        return cls._send(client, request, List[str])
