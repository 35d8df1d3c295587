"""
Mini Model
"""

from typing import ClassVar, Optional

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class Mini(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/minis", localized=True, id_type=int, supports_all=True
    )

    id: int
    name: str
    unlock: Optional[str] = None
    icon: str
    order: int
    item_id: int
