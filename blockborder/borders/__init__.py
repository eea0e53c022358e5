"""Border normalization: classification, hydration, dehydration and sanitizing."""
from blockborder.borders.models import BORDER_SIDES, BorderKind, BorderStyle, ColorValue
from blockborder.borders.shape import (
    classify_border,
    has_split_borders,
    is_defined_border,
    is_empty_border,
)
from blockborder.borders.sanitizer import sanitize_border
from blockborder.borders.hydration import hydrate_border
from blockborder.borders.dehydration import dehydrate_border
from blockborder.borders.control import BorderControlState, parse_unit

__all__ = [
    "BORDER_SIDES",
    "BorderKind",
    "BorderStyle",
    "ColorValue",
    "classify_border",
    "has_split_borders",
    "is_defined_border",
    "is_empty_border",
    "sanitize_border",
    "hydrate_border",
    "dehydrate_border",
    "BorderControlState",
    "parse_unit",
]
