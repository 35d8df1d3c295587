"""
Account Progress Models

Achievement, mastery, wallet and completion state of an account.
"""

from typing import Any, ClassVar, List, Optional

from pydantic import RootModel, field_serializer, model_validator

from ....core.models import Gw2Model, Gw2RootList, ResourceDescriptor, SingleEndpoint
from ._descriptors import account_endpoint


class AccountAchievement(Gw2Model):
    id: int
    bits: Optional[List[int]] = None
    current: Optional[int] = None
    max: Optional[int] = None
    done: bool
    repeated: Optional[int] = None
    unlocked: Optional[bool] = None

    def is_unlocked(self) -> bool:
        """Achievements without an ``unlocked`` field are unlocked."""
        return True if self.unlocked is None else self.unlocked


class AccountAchievements(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("achievements")

    root: List[AccountAchievement]


class AccountDailyCrafting(Gw2RootList, SingleEndpoint):
    """Time-gated crafts done since the daily reset."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("dailycrafting")

    root: List[str]


class AccountDungeons(Gw2RootList, SingleEndpoint):
    """Dungeon paths completed since the daily reset."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("dungeons")

    root: List[str]


class AccountLuck(RootModel, SingleEndpoint):
    """
    Total luck consumed by the account.

    The API sends ``[]`` for an account without luck and
    ``[{"id": "luck", "value": n}]`` otherwise.
    """

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("luck")

    root: int

    @model_validator(mode="before")
    @classmethod
    def unwrap_luck(cls, data: Any) -> Any:
        if not isinstance(data, list):
            return data
        if not data:
            return 0
        if len(data) > 1:
            raise ValueError("expected at most one luck entry")
        entry = data[0]
        if not isinstance(entry, dict) or entry.get("id") != "luck":
            raise ValueError("expected a luck id value")
        if "value" not in entry:
            raise ValueError("missing field value")
        return entry["value"]

    @field_serializer("root")
    def wrap_luck(self, value: int) -> List[dict]:
        if value == 0:
            return []
        return [{"id": "luck", "value": value}]

    @property
    def value(self) -> int:
        return self.root


class AccountMapChests(Gw2RootList, SingleEndpoint):
    """Hero's Choice chests opened since the daily reset."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("mapchests")

    root: List[str]


class AccountMastery(Gw2Model):
    id: int
    level: int = 0


class AccountMasteries(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("masteries")

    root: List[AccountMastery]


class MasteryRegionPoints(Gw2Model):
    region: str
    spent: int
    earned: int


class AccountMasteryPoints(Gw2Model, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("mastery/points")

    totals: List[MasteryRegionPoints]
    unlocked: List[int]


class ProgressionEntry(Gw2Model):
    id: str
    value: int


class AccountProgression(Gw2RootList, SingleEndpoint):
    """Account-wide progression counters, such as fractal agony impedance."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("progression")

    root: List[ProgressionEntry]


class AccountRaids(Gw2RootList, SingleEndpoint):
    """Raid encounters cleared since the weekly reset."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("raids")

    root: List[str]


class WalletEntry(Gw2Model):
    id: int
    value: int


class AccountWallet(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("wallet")

    root: List[WalletEntry]

    def balance(self, currency_id: int) -> int:
        """Amount held of a currency, zero when absent."""
        for entry in self.root:
            if entry.id == currency_id:
                return entry.value
        return 0


class AccountWorldBosses(Gw2RootList, SingleEndpoint):
    """World bosses defeated since the daily reset."""

    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("worldbosses")

    root: List[str]
