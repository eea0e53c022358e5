"""Color literal validation for palette entries.

Validates the literal values a palette color may carry: hex codes,
functional ``rgb()``/``rgba()``/``hsl()``/``hsla()`` notation, CSS custom
property references and plain CSS keywords.
"""

import re
from typing import Optional

HEX_PATTERN = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
FUNCTIONAL_PATTERN = re.compile(r"^(rgb|rgba|hsl|hsla)\(\s*[^()]+\)$", re.IGNORECASE)
VARIABLE_PATTERN = re.compile(r"^var\(\s*--[a-z0-9_-]+\s*(,[^()]*)?\)$", re.IGNORECASE)
KEYWORD_PATTERN = re.compile(r"^[a-z]+$", re.IGNORECASE)


def validate_hex_color(color: str) -> bool:
    """Validate that color is a valid hex color code.

    Args:
        color: Hex color code to validate (e.g., "#FF0000", "#F00" or "#FF000080")

    Returns:
        True if valid hex color, False otherwise
    """
    if not color:
        return False

    return bool(HEX_PATTERN.match(color.strip()))


def validate_functional_color(color: str) -> bool:
    """Validate ``rgb()``, ``rgba()``, ``hsl()`` and ``hsla()`` notation."""
    if not color:
        return False

    return bool(FUNCTIONAL_PATTERN.match(color.strip()))


def validate_color_literal(color: Optional[str]) -> bool:
    """Validate a literal color value as stored in a palette.

    Args:
        color: Literal color value

    Returns:
        True if valid, False otherwise
    """
    if not color or not color.strip():
        return False

    color = color.strip()

    if color.startswith("#"):
        return validate_hex_color(color)

    return bool(
        FUNCTIONAL_PATTERN.match(color)
        or VARIABLE_PATTERN.match(color)
        or KEYWORD_PATTERN.match(color)
    )
