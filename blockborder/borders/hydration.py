"""Hydration: expand stored border attributes into a display-ready border.

Named colors are persisted as slugs (``borderColor`` for a flat border,
``sideBorderColors`` for split borders). For display, each slug is resolved
against the palette and its literal value written into the border's
``color`` field. The stored attributes are never modified.
"""

from typing import Any, Dict, Mapping, Optional, Sequence

from blockborder.palette.models import ColorOrigin
from blockborder.palette.resolver import get_multi_origin_color


def get_border_styles(attributes: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    style = attributes.get("style") or {}
    return style.get("border")


def hydrate_border(
    attributes: Mapping[str, Any], origins: Sequence[ColorOrigin]
) -> Optional[Dict[str, Any]]:
    """Build the border value shown by the border controls.

    ``borderColor`` takes priority over ``sideBorderColors`` when both are
    present.

    Args:
        attributes: Persisted block attributes
        origins: Ordered palette origins

    Returns:
        A flat or split border with resolved colors, or None when no border
        is stored.
    """
    border_color = attributes.get("borderColor")
    side_border_colors = attributes.get("sideBorderColors")
    border_styles = get_border_styles(attributes)

    if border_color:
        color = get_multi_origin_color(origins, named_color=border_color).color
        if color:
            return {**(border_styles or {}), "color": color}
        return border_styles

    if side_border_colors:
        hydrated = dict(border_styles or {})

        for side, named_color in side_border_colors.items():
            color = get_multi_origin_color(origins, named_color=named_color).color
            if color:
                hydrated[side] = {**(hydrated.get(side) or {}), "color": color}

        return hydrated

    return border_styles
