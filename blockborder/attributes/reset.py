"""Border and radius reset operations.

Border resets clear colors, styles and widths but keep the radius, which has
its own control. Radius resets clear the radius and nothing else.
"""

from typing import Any, Dict, Mapping, Optional

from blockborder.attributes.cleaning import clean_empty_object
from blockborder.attributes.patch import BorderPatch


def _border_radius(style: Optional[Mapping[str, Any]]) -> Any:
    return ((style or {}).get("border") or {}).get("radius")


def _style_without_border(style: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    return clean_empty_object({**(style or {}), "border": {"radius": _border_radius(style)}})


def remove_border_attribute(
    style: Optional[Mapping[str, Any]], attribute: str
) -> Optional[Dict[str, Any]]:
    """Return a cleaned copy of ``style`` with ``style.border[attribute]`` removed."""
    style = style or {}
    return clean_empty_object(
        {**style, "border": {**(style.get("border") or {}), attribute: None}}
    )


def reset_border(attributes: Mapping[str, Any]) -> BorderPatch:
    """Patch that removes the border but keeps the radius."""
    return BorderPatch(
        style=_style_without_border(attributes.get("style")),
        border_color=None,
        side_border_colors=None,
    )


def reset_border_filter(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Reset-all filter: the full attribute set with the border removed."""
    return {
        **attributes,
        "borderColor": None,
        "sideBorderColors": None,
        "style": _style_without_border(attributes.get("style")),
    }


def reset_border_radius(attributes: Mapping[str, Any]) -> BorderPatch:
    """Patch that removes the radius and leaves every other border field alone."""
    return BorderPatch(style=remove_border_attribute(attributes.get("style"), "radius"))


def reset_border_radius_filter(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Reset-all filter: the full attribute set with the radius removed."""
    return {
        **attributes,
        "style": remove_border_attribute(attributes.get("style"), "radius"),
    }
