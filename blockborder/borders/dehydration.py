"""Dehydration: turn an edited border into the persisted attribute patch.

Literal colors that match a palette color are replaced by that color's slug
(``borderColor`` for a flat border, ``sideBorderColors[side]`` for a split
border) and the literal is cleared. Literals with no palette match are kept
as-is. The existing border radius is carried over, since the border controls
never supply it.
"""

import copy
from typing import Any, Dict, Mapping, Optional, Sequence

from blockborder.attributes.cleaning import clean_empty_object
from blockborder.attributes.patch import BorderPatch
from blockborder.borders.models import BORDER_SIDES, BorderKind, ColorValue
from blockborder.borders.shape import classify_border
from blockborder.palette.models import ColorOrigin
from blockborder.palette.resolver import get_multi_origin_color


def _resolve_custom_color(origins: Sequence[ColorOrigin], color: str) -> ColorValue:
    return ColorValue.from_resolved(get_multi_origin_color(origins, custom_color=color))


def dehydrate_border(
    new_border: Optional[Mapping[str, Any]],
    previous_style: Optional[Mapping[str, Any]],
    origins: Sequence[ColorOrigin],
) -> BorderPatch:
    """Build the attribute patch for a border edit.

    Args:
        new_border: Border value emitted by the controls (flat, split or None).
            Must be the raw edited value, not a hydrated display value.
        previous_style: The block's current ``style`` attribute
        origins: Ordered palette origins

    Returns:
        BorderPatch carrying ``style``, ``borderColor`` and
        ``sideBorderColors`` together.
    """
    previous_style = previous_style or {}
    radius = (previous_style.get("border") or {}).get("radius")

    border_styles: Optional[Dict[str, Any]] = copy.deepcopy(dict(new_border)) if new_border else None
    if radius:
        border_styles = {**(border_styles or {}), "radius": radius}

    border_color: Optional[str] = None
    side_border_colors: Optional[Dict[str, Optional[str]]] = None
    kind = classify_border(border_styles)

    if kind is BorderKind.SPLIT:
        side_border_colors = {}

        for side in BORDER_SIDES:
            side_border = border_styles.get(side)
            if not side_border or not side_border.get("color"):
                continue

            value = _resolve_custom_color(origins, side_border["color"])
            side_border_colors[side] = value.slug
            side_border["color"] = value.literal

    elif kind is BorderKind.FLAT and border_styles.get("color"):
        value = _resolve_custom_color(origins, border_styles["color"])
        if value.is_named:
            border_color = value.slug
            border_styles["color"] = None

    return BorderPatch(
        style=clean_empty_object({**previous_style, "border": border_styles}),
        border_color=border_color,
        side_border_colors=clean_empty_object(side_border_colors),
    )
