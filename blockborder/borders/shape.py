"""Flat/split border classification."""

from typing import Any, Mapping, Optional

from blockborder.borders.models import BORDER_PROPS, BORDER_SIDES, BorderKind


def is_empty_border(border: Optional[Mapping[str, Any]]) -> bool:
    """True when a single border has none of color, style or width set."""
    if not border:
        return True
    return all(border.get(prop) is None for prop in BORDER_PROPS)


def has_split_borders(border: Optional[Mapping[str, Any]]) -> bool:
    """True when any of the four sides has color, style or width set."""
    if not border:
        return False
    return any(not is_empty_border(border.get(side)) for side in BORDER_SIDES)


def is_defined_border(border: Optional[Mapping[str, Any]]) -> bool:
    """True for a flat border with a field set, or a split border with a defined side."""
    if not border:
        return False
    return has_split_borders(border) or not is_empty_border(border)


def classify_border(border: Optional[Mapping[str, Any]]) -> BorderKind:
    if not border:
        return BorderKind.NONE
    if has_split_borders(border):
        return BorderKind.SPLIT
    return BorderKind.FLAT
