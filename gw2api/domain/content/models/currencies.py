"""
Currency Model
"""

from typing import ClassVar

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class Currency(Gw2Model, ListEndpoint):
    """A wallet currency."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/currencies", localized=True, id_type=int, supports_all=True
    )

    id: int
    name: str
    description: str
    icon: str
    order: int
