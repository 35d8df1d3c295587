"""
World Model

Worlds and their population level.
"""

from enum import Enum
from typing import ClassVar

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class Population(str, Enum):
    """World population, ordered from least to most populated."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "VeryHigh"
    FULL = "Full"

    @property
    def rank(self) -> int:
        return _POPULATION_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Population):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Population):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Population):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Population):
            return NotImplemented
        return self.rank >= other.rank


_POPULATION_RANK = {population: rank for rank, population in enumerate(Population)}


class World(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/worlds", localized=True, id_type=int, supports_all=True
    )

    id: int
    name: str
    population: Population
