"""Block type not found exception."""
from typing import List, Optional

from blockborder.exceptions.base import RegistryError


class BlockTypeNotFoundError(RegistryError):
    """Raised when a block type is not registered."""

    def __init__(self, block_type: str, available_types: Optional[List[str]] = None):
        available_text = ""
        if available_types:
            available_text = f" Registered block types: {', '.join(sorted(available_types))}."

        message = f"Block type '{block_type}' is not registered.{available_text}"
        super().__init__(message, code="BLOCK_TYPE_NOT_FOUND", details={"block_type": block_type})
        self.block_type = block_type
