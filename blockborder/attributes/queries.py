"""Queries over persisted border attributes."""

from typing import Any, Mapping

from blockborder.borders.shape import is_defined_border


def has_border_value(attributes: Mapping[str, Any]) -> bool:
    """True when the block has any border color, style or width configured."""
    style = attributes.get("style") or {}
    return bool(
        is_defined_border(style.get("border"))
        or attributes.get("borderColor")
        or attributes.get("sideBorderColors")
    )


def has_border_radius_value(attributes: Mapping[str, Any]) -> bool:
    """True when a border radius is set, either uniform or per corner."""
    border = (attributes.get("style") or {}).get("border") or {}
    radius = border.get("radius")

    if isinstance(radius, Mapping):
        return any(corner not in (None, "") for corner in radius.values())
    return bool(radius)
