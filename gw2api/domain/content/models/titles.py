"""
Title Model
"""

from typing import ClassVar, List, Optional

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class Title(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/titles", localized=True, id_type=int, supports_all=True
    )

    id: int
    name: str
    achievements: Optional[List[int]] = None
    ap_required: Optional[int] = None
