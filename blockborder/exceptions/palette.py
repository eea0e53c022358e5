"""Palette and border value validation exceptions."""

from typing import Any, Dict, Optional

from blockborder.exceptions.base import ValidationError


class PaletteValidationError(ValidationError):
    """Raised when a palette file or color entry is malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_PALETTE", message=message, details=details)


class InvalidBorderStyleError(ValidationError):
    """Raised when a border style keyword is not one of solid, dashed or dotted."""

    def __init__(self, style: Any):
        super().__init__(
            code="INVALID_BORDER_STYLE",
            message=f"Invalid border style: {style!r}. Expected one of: solid, dashed, dotted.",
            details={"style": style},
        )
        self.style = style
