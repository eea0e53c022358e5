"""Border value types: sides, style keywords, shape kinds and color values."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from blockborder.exceptions import InvalidBorderStyleError
from blockborder.palette.models import ResolvedColor

# Fixed processing order for split borders
BORDER_SIDES = ("top", "right", "bottom", "left")

# Fields a single border (flat or one side) may carry
BORDER_PROPS = ("color", "style", "width")


class BorderStyle(str, Enum):
    """Supported border line styles."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"

    @classmethod
    def parse(cls, value: Any) -> "BorderStyle":
        """Parse a style keyword, raising InvalidBorderStyleError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidBorderStyleError(value) from None


class BorderKind(str, Enum):
    """Shape of a border value."""

    NONE = "none"
    FLAT = "flat"
    SPLIT = "split"


@dataclass(frozen=True)
class ColorValue:
    """A border color at rest: a palette slug, a literal value, or nothing.

    Exactly one of ``slug`` and ``literal`` is set for named and literal
    colors, so persisting a ColorValue can never store both.
    """

    slug: Optional[str] = None
    literal: Optional[str] = None

    def __post_init__(self):
        if self.slug is not None and self.literal is not None:
            raise ValueError("ColorValue cannot be both named and literal")

    @classmethod
    def named(cls, slug: str) -> "ColorValue":
        return cls(slug=slug)

    @classmethod
    def custom(cls, literal: str) -> "ColorValue":
        return cls(literal=literal)

    @classmethod
    def unset(cls) -> "ColorValue":
        return cls()

    @classmethod
    def from_resolved(cls, resolved: ResolvedColor) -> "ColorValue":
        if resolved.slug:
            return cls.named(resolved.slug)
        if resolved.color:
            return cls.custom(resolved.color)
        return cls.unset()

    @property
    def is_named(self) -> bool:
        return self.slug is not None
