"""Attribute patch model handed to the block's attribute sink."""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class BorderPatch(BaseModel):
    """A set of block attribute updates produced by a border edit or reset.

    Only fields that were explicitly given are part of the patch. A field
    given as ``None`` clears that attribute; a field that was not given leaves
    the stored attribute alone.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    style: Optional[Dict[str, Any]] = None
    border_color: Optional[str] = Field(default=None, alias="borderColor")
    side_border_colors: Optional[Dict[str, Optional[str]]] = Field(
        default=None, alias="sideBorderColors"
    )

    def to_attributes(self) -> Dict[str, Any]:
        """Patch as block attributes (camelCase keys), explicit fields only."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    def apply_to(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``attributes`` with this patch merged in."""
        return {**attributes, **self.to_attributes()}
