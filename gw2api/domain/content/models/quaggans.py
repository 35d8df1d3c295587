"""
Quaggan Model
"""

from typing import ClassVar

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class Quaggan(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/quaggans", id_type=str, supports_all=True
    )

    id: str
    url: str
