"""Color origin not found exception."""
from typing import List, Optional

from blockborder.exceptions.base import RegistryError


class OriginNotFoundError(RegistryError):
    """Raised when a color origin cannot be found in the palette."""

    def __init__(self, origin: str, available_origins: Optional[List[str]] = None):
        """
        Args:
            origin: Name of the origin that was not found
            available_origins: Origins currently loaded
        """
        available_text = ""
        if available_origins:
            available_text = f" Available origins: {', '.join(available_origins)}."

        message = f"Color origin '{origin}' not found.{available_text}"
        super().__init__(message, code="ORIGIN_NOT_FOUND", details={"origin": origin})
        self.origin = origin
