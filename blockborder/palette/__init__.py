"""Color palette package: origins, lookup and loading."""
from blockborder.palette.models import Color, ColorOrigin, ResolvedColor
from blockborder.palette.registry import PaletteRegistry
from blockborder.palette.resolver import get_color_by_property, get_multi_origin_color

__all__ = [
    "Color",
    "ColorOrigin",
    "ResolvedColor",
    "PaletteRegistry",
    "get_color_by_property",
    "get_multi_origin_color",
]
