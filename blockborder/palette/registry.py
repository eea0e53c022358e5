"""Palette registry: loads color origins from YAML files."""

from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from blockborder.exceptions import OriginNotFoundError, PaletteValidationError
from blockborder.logger import Logger
from blockborder.palette.models import ColorOrigin
from blockborder.registry_base import BaseRegistry


class PaletteRegistry(BaseRegistry):
    """Manages loading and lookup of color origins.

    Each origin lives in ``<palette_dir>/<origin>.yaml``::

        name: theme
        colors:
          - name: Blue
            slug: blue
            color: "#72aee6"

    Origins are kept in the configured lookup order, which is the order
    color resolution searches them in.
    """

    def __init__(self, palette_dir: str, logger: Logger, origin_order: Sequence[str]):
        """
        Initialize the palette registry.

        Args:
            palette_dir: Path to directory containing ``<origin>.yaml`` files
            logger: Logger instance
            origin_order: Origin names in lookup priority order
        """
        self.origin_order = list(origin_order)
        self._origins: Dict[str, ColorOrigin] = {}
        super().__init__(palette_dir, logger)

    def _get_registry_type(self) -> str:
        return "palettes"

    def _load_items(self) -> None:
        """Load every configured origin, skipping missing or invalid files."""
        for origin_name in self.origin_order:
            origin_file = self.registry_dir / f"{origin_name}.yaml"
            if not origin_file.exists():
                self.logger.warning(f"Skipping origin '{origin_name}': {origin_file} not found")
                continue

            data = self._load_yaml_file(origin_file)
            if data is None:
                continue

            data.setdefault("name", origin_name)
            try:
                origin = ColorOrigin.model_validate(data)
            except (PaletteValidationError, PydanticValidationError) as e:
                self.logger.error(f"Failed to load origin '{origin_name}' from {origin_file}: {e}")
                continue

            if origin.name != origin_name:
                self.logger.warning(
                    f"Origin file {origin_file} declares name '{origin.name}', "
                    f"registering it as '{origin_name}'"
                )
                origin = origin.model_copy(update={"name": origin_name})

            self._origins[origin_name] = origin
            self.logger.info(f"Loaded origin: {origin_name} ({len(origin.colors)} colors)")

    def get_origins(self) -> List[ColorOrigin]:
        """Loaded origins in lookup order."""
        return [self._origins[name] for name in self.origin_order if name in self._origins]

    def get_origin(self, name: str) -> ColorOrigin:
        """Get a single origin by name.

        Raises:
            OriginNotFoundError: If the origin is not loaded
        """
        origin = self._origins.get(name)
        if origin is None:
            raise OriginNotFoundError(name, available_origins=self.list_origins())
        return origin

    def find_origin(self, name: str) -> Optional[ColorOrigin]:
        return self._origins.get(name)

    def list_origins(self) -> List[str]:
        return [origin.name for origin in self.get_origins()]

    def origin_exists(self, name: str) -> bool:
        return name in self._origins
