"""Multi-origin color resolution.

Looks colors up by slug or by literal value across an ordered sequence of
color origins. Origins are searched in order and, within an origin, colors
are searched in order; the first match wins.
"""

from typing import Literal, Optional, Sequence

from blockborder.palette.models import Color, ColorOrigin, ResolvedColor

ColorProperty = Literal["slug", "color"]


def get_color_by_property(
    origins: Sequence[ColorOrigin], property: ColorProperty, value: Optional[str]
) -> Optional[Color]:
    """Return the first color whose ``property`` equals ``value``, or None."""
    for origin in origins:
        for color in origin.colors:
            if getattr(color, property) == value:
                return color
    return None


def get_multi_origin_color(
    origins: Sequence[ColorOrigin],
    named_color: Optional[str] = None,
    custom_color: Optional[str] = None,
) -> ResolvedColor:
    """Resolve a named and/or custom color against the palette.

    Args:
        origins: Ordered color origins (e.g. default, theme, user)
        named_color: Slug of a palette color
        custom_color: Literal color value chosen by the user

    Returns:
        The matching palette color when ``named_color`` matches a slug.
        Otherwise, when ``custom_color`` is given, the palette color with that
        literal value or an unnamed ``ResolvedColor(color=custom_color)``.
        An empty ``ResolvedColor`` when neither yields anything.
    """
    if named_color:
        match = get_color_by_property(origins, "slug", named_color)
        if match is not None:
            return ResolvedColor.from_color(match)

    if not custom_color:
        return ResolvedColor(color=None)

    match = get_color_by_property(origins, "color", custom_color)
    if match is not None:
        return ResolvedColor.from_color(match)
    return ResolvedColor(color=custom_color)
