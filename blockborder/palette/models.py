"""Palette data models: colors, color origins and resolved color descriptors."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from blockborder.exceptions import PaletteValidationError
from blockborder.palette.color_validator import validate_color_literal


class Color(BaseModel):
    """A named palette color.

    ``slug`` is the stable identifier persisted in block attributes;
    ``color`` is the literal value it stands for.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    slug: str
    color: str

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        if not v or not v.strip():
            raise PaletteValidationError("Color slug cannot be empty")
        return v

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not validate_color_literal(v):
            raise PaletteValidationError(f"Invalid color value: {v!r}", details={"color": v})
        return v


class ColorOrigin(BaseModel):
    """One tier of the palette (default, theme or user) with its ordered colors."""

    model_config = ConfigDict(frozen=True)

    name: str
    colors: List[Color] = []


class ResolvedColor(BaseModel):
    """Result of a palette lookup.

    ``slug`` (and ``name``) are only present when the lookup matched a named
    palette color. An unnamed literal carries ``color`` alone, and a complete
    miss carries nothing.
    """

    model_config = ConfigDict(frozen=True)

    slug: Optional[str] = None
    color: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_color(cls, color: Color) -> "ResolvedColor":
        return cls(slug=color.slug, color=color.color, name=color.name)

    @property
    def is_named(self) -> bool:
        return self.slug is not None
