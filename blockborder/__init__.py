"""blockborder: border state resolution for editable content blocks.

Resolves palette colors across ordered origins, hydrates stored borders for
display, dehydrates edits into slug or literal attributes, and builds the
attribute patches for edits and resets while preserving border radius.
"""

from blockborder.attributes import BorderPatch, clean_empty_object
from blockborder.borders import (
    BorderControlState,
    BorderKind,
    BorderStyle,
    ColorValue,
    classify_border,
    dehydrate_border,
    hydrate_border,
    sanitize_border,
)
from blockborder.palette import Color, ColorOrigin, ResolvedColor, get_multi_origin_color
from blockborder.panel import BorderPanel

__version__ = "0.1.0"

__all__ = [
    "BorderControlState",
    "BorderKind",
    "BorderPanel",
    "BorderPatch",
    "BorderStyle",
    "Color",
    "ColorOrigin",
    "ColorValue",
    "ResolvedColor",
    "classify_border",
    "clean_empty_object",
    "dehydrate_border",
    "get_multi_origin_color",
    "hydrate_border",
    "sanitize_border",
]
