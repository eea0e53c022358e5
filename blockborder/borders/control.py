"""State behind a single border control: width, unit, style and color edits.

The control keeps the border it currently shows and reports every change
through ``on_change``. By default changes are sanitized, so a border left
without width and color is reported as None. Callers that need to keep a
bare style selection while the user is still typing a width can opt out
with ``should_sanitize=False``.
"""

import re
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from blockborder.borders.models import BorderStyle
from blockborder.borders.sanitizer import sanitize_border
from blockborder.config import DEFAULT_WIDTH_UNIT

Number = Union[int, float]

CSS_UNITS = (
    "px", "%", "em", "rem", "vw", "vh", "vmin", "vmax",
    "ch", "ex", "cm", "mm", "in", "pc", "pt",
)

_UNIT_PATTERN = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))?\s*(.*?)\s*$")


def parse_unit(value: Any) -> Tuple[Optional[Number], Optional[str]]:
    """Split a CSS length into its quantity and unit.

    Returns ``(None, None)`` for an empty value. The unit is None when it
    is missing or not a known CSS unit.

    >>> parse_unit("2px")
    (2, 'px')
    >>> parse_unit("1.5em")
    (1.5, 'em')
    """
    if value is None:
        return None, None

    match = _UNIT_PATTERN.match(str(value))
    if match is None:
        return None, None

    raw_quantity, raw_unit = match.groups()
    quantity: Optional[Number] = None
    if raw_quantity is not None:
        number = float(raw_quantity)
        quantity = int(number) if number.is_integer() else number

    unit = raw_unit.lower()
    return quantity, unit if unit in CSS_UNITS else None


BorderValue = Optional[Dict[str, Any]]


class BorderControlState:
    """Edit handlers for one flat border (or one side of a split border)."""

    def __init__(
        self,
        value: Optional[Mapping[str, Any]],
        on_change: Callable[[BorderValue], None],
        should_sanitize: bool = True,
    ):
        self.value: BorderValue = dict(value) if value else None
        self.on_change = on_change
        self.should_sanitize = should_sanitize

    @property
    def width_value(self) -> Optional[Number]:
        return parse_unit((self.value or {}).get("width"))[0]

    @property
    def width_unit(self) -> str:
        return parse_unit((self.value or {}).get("width"))[1] or DEFAULT_WIDTH_UNIT

    def on_border_change(self, new_border: Optional[Mapping[str, Any]]) -> None:
        border = dict(new_border) if new_border is not None else None
        if self.should_sanitize:
            border = sanitize_border(border)

        self.value = border
        self.on_change(border)

    def on_width_change(self, new_width: Optional[str]) -> None:
        width = None if new_width == "" else new_width
        self.on_border_change({**(self.value or {}), "width": width})

    def on_slider_change(self, value: Number) -> None:
        """Apply a slider position using the unit currently in effect."""
        self.on_width_change(f"{value}{self.width_unit}")

    def on_color_change(self, color: Optional[str]) -> None:
        self.on_border_change({**(self.value or {}), "color": color})

    def on_style_change(self, style: Optional[Union[str, BorderStyle]]) -> None:
        """Apply a style keyword; None clears the style.

        Raises:
            InvalidBorderStyleError: If ``style`` is not solid, dashed or dotted
        """
        keyword = BorderStyle.parse(style).value if style is not None else None
        self.on_border_change({**(self.value or {}), "style": keyword})
