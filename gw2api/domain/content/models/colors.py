"""
Color Model

Dye colors from /v2/colors.
"""

from typing import ClassVar, List, Optional

from ....core.models import Gw2Model, ListEndpoint, ResourceDescriptor


class ArmorColor(Gw2Model):
    """How a dye renders on one armor material."""
    brightness: int
    contrast: float
    hue: int
    saturation: float
    lightness: float
    rgb: List[int]


class Color(Gw2Model, ListEndpoint):
    descriptor: ClassVar[ResourceDescriptor] = ResourceDescriptor(
        "/v2/colors", localized=True, id_type=int, supports_all=True
    )

    id: int
    name: str
    base_rgb: List[int]
    cloth: ArmorColor
    leather: ArmorColor
    metal: ArmorColor
    fur: Optional[ArmorColor] = None
    item: Optional[int] = None
    categories: List[str]
