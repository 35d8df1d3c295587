"""
Account Unlock Models

Cosmetics, collections and other account-wide unlocks. Most endpoints
return a bare list of ids.
"""

from typing import ClassVar, List

from ....core.models import Gw2Model, Gw2RootList, ResourceDescriptor, SingleEndpoint
from ._descriptors import account_endpoint


class AccountDyes(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("dyes")

    root: List[int]


class AccountFinisher(Gw2Model):
    id: int
    permanent: bool = True
    quantity: int = 0


class AccountFinishers(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("finishers")

    root: List[AccountFinisher]


class AccountGliders(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("gliders")

    root: List[int]


class AccountHomeCats(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("home/cats")

    root: List[int]


class AccountHomeNodes(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("home/nodes")

    root: List[str]


class AccountMailCarriers(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("mailcarriers")

    root: List[int]


class AccountMinis(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("minis")

    root: List[int]


class AccountMountSkins(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("mounts/skins")

    root: List[int]


class AccountMountTypes(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("mounts/types")

    root: List[str]


class AccountNovelties(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("novelties")

    root: List[int]


class AccountOutfits(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("outfits")

    root: List[int]


class AccountPvPHeroes(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("pvp/heroes")

    root: List[int]


class AccountRecipes(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("recipes")

    root: List[int]


class AccountSkins(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("skins")

    root: List[int]


class AccountTitles(Gw2RootList, SingleEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = account_endpoint("titles")

    root: List[int]
