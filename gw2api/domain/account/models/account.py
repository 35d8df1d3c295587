"""
Account Model

The account summary and its access flags.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import RootModel, field_serializer

from ....core.models import Gw2Model, ResourceDescriptor, SingleEndpoint
from ._descriptors import account_endpoint


class AccessFlag(str, Enum):
    """Game access an account owns. Unknown values fail decoding."""
    NONE = "None"
    PLAY_FOR_FREE = "PlayForFree"
    GUILD_WARS_2 = "GuildWars2"
    HEART_OF_THORNS = "HeartOfThorns"
    PATH_OF_FIRE = "PathOfFire"
    END_OF_DRAGONS = "EndOfDragons"


class AccountAccess(RootModel):
    """Set of access flags, decoded from and encoded to a string array."""

    root: FrozenSet[AccessFlag]

    def __iter__(self):
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, flag) -> bool:
        return flag in self.root

    @field_serializer("root")
    def serialize_flags(self, flags: FrozenSet[AccessFlag]) -> List[str]:
        return [flag.value for flag in AccessFlag if flag in flags]

    def none(self) -> bool:
        return AccessFlag.NONE in self.root

    def play_for_free(self) -> bool:
        return AccessFlag.PLAY_FOR_FREE in self.root

    def guild_wars_2(self) -> bool:
        return AccessFlag.GUILD_WARS_2 in self.root

    def heart_of_thorns(self) -> bool:
        return AccessFlag.HEART_OF_THORNS in self.root

    def path_of_fire(self) -> bool:
        return AccessFlag.PATH_OF_FIRE in self.root

    def end_of_dragons(self) -> bool:
        return AccessFlag.END_OF_DRAGONS in self.root


class Account(Gw2Model, SingleEndpoint):
    """
    Account summary.

    Fields marked optional are only present when the token has the
    matching permission (``progression`` for ``fractal_level``,
    ``daily_ap``, ``monthly_ap`` and ``wvw_rank``; ``guilds`` for
    ``guild_leader``; ``builds`` for ``build_storage_slots``).
    """

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint()

    id: str
    age: int
    name: str
    world: int
    guilds: List[str]
    guild_leader: Optional[List[str]] = None
    created: datetime
    access: AccountAccess
    commander: bool
    fractal_level: Optional[int] = None
    daily_ap: Optional[int] = None
    monthly_ap: Optional[int] = None
    wvw_rank: Optional[int] = None
    last_modified: Optional[datetime] = None
    build_storage_slots: Optional[int] = None
