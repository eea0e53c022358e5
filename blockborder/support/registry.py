"""Block type registry: loads block definitions and their border support."""

from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from blockborder.exceptions import BlockTypeNotFoundError
from blockborder.logger import Logger
from blockborder.registry_base import BaseRegistry
from blockborder.support.models import BlockType


class BlockTypeRegistry(BaseRegistry):
    """Manages loading and discovery of block types.

    Each block lives in its own directory with a ``block.yaml``::

        name: core/group
        title: Group
        supports:
          border:
            color: true
            radius: true
            default_controls:
              color: true
    """

    def __init__(self, blocks_dir: str, logger: Logger):
        self._block_types: Dict[str, BlockType] = {}
        super().__init__(blocks_dir, logger)

    def _get_registry_type(self) -> str:
        return "blocks"

    def _load_items(self) -> None:
        for definition_file in self.list_files("*/block.yaml"):
            data = self._load_yaml_file(definition_file)
            if data is None:
                continue

            try:
                block_type = BlockType.model_validate(data)
            except PydanticValidationError as e:
                self.logger.error(f"Failed to load block type from {definition_file.parent.name}: {e}")
                continue

            if block_type.name in self._block_types:
                self.logger.warning(
                    f"Duplicate block type '{block_type.name}' in {definition_file}, keeping the first"
                )
                continue

            self._block_types[block_type.name] = block_type
            self.logger.info(f"Loaded block type: {block_type.name}")

    def get_block_type(self, name: str) -> BlockType:
        """Get a block type by name.

        Raises:
            BlockTypeNotFoundError: If the block type is not registered
        """
        block_type = self._block_types.get(name)
        if block_type is None:
            raise BlockTypeNotFoundError(name, available_types=list(self._block_types))
        return block_type

    def find_block_type(self, name: str) -> Optional[BlockType]:
        return self._block_types.get(name)

    def list_block_types(self) -> List[str]:
        return sorted(self._block_types)

    def block_type_exists(self, name: str) -> bool:
        return name in self._block_types
