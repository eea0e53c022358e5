"""Block attribute patches, resets and queries."""
from blockborder.attributes.cleaning import clean_empty_object
from blockborder.attributes.patch import BorderPatch
from blockborder.attributes.queries import has_border_radius_value, has_border_value
from blockborder.attributes.reset import (
    remove_border_attribute,
    reset_border,
    reset_border_filter,
    reset_border_radius,
    reset_border_radius_filter,
)

__all__ = [
    "BorderPatch",
    "clean_empty_object",
    "has_border_value",
    "has_border_radius_value",
    "remove_border_attribute",
    "reset_border",
    "reset_border_filter",
    "reset_border_radius",
    "reset_border_radius_filter",
]
