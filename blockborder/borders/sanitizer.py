"""Border sanitization."""

from typing import Any, Dict, Mapping, Optional


def sanitize_border(border: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop a border that has neither a width nor a color.

    A style selection alone does not keep a border: with no width and no
    color the style is discarded too.
    """
    if border is None:
        return None

    has_no_width = border.get("width") is None or border.get("width") == ""
    has_no_color = border.get("color") is None

    if has_no_width and has_no_color:
        return None

    return border
