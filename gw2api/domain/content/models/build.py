"""
Build Model
"""

from typing import ClassVar

from ....core.models import Gw2Model, ResourceDescriptor, SingleEndpoint


class Build(Gw2Model, SingleEndpoint):
    """Current game build id."""

    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor("/v2/build")

    id: int
