"""
WvW Rank Model
"""

from typing import ClassVar

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class Rank(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/wvw/ranks", localized=True, id_type=int, supports_all=True
    )

    id: int
    title: str
    min_rank: int
