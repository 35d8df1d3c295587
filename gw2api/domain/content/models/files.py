"""
File Model
"""

from typing import ClassVar

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class File(Gw2Model, ListEndpoint):
    """A commonly used asset, such as a map icon."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/files", id_type=str, supports_all=True
    )

    id: str
    icon: str
