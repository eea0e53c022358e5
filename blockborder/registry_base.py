"""Base registry for YAML-backed palette and block type definitions."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from blockborder.logger import Logger


class BaseRegistry(ABC):
    """Abstract base for registries that load definitions from a directory."""

    def __init__(self, registry_dir: str, logger: Logger):
        """
        Initialize the registry.

        Args:
            registry_dir: Path to directory containing definitions
            logger: Logger instance
        """
        self.registry_dir = Path(registry_dir)
        self.logger = logger

        if not self.registry_dir.exists():
            self.logger.warning(
                f"Registry directory does not exist: {self.registry_dir}",
                registry=self._get_registry_type(),
            )

        self._load_items()

    def _get_registry_type(self) -> str:
        """Get registry type (palettes or blocks). Override in subclasses."""
        return "items"

    @abstractmethod
    def _load_items(self) -> None:
        """Load all items from registry directory. Implemented by subclasses."""
        pass

    def _load_yaml_file(self, file_path: Path) -> Optional[Dict[str, Any]]:
        """Load and parse a YAML mapping, returning None if it cannot be used."""
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Failed to parse YAML {file_path}: {e}")
            return None

        if not isinstance(data, dict):
            self.logger.error(
                f"Expected a mapping in {file_path}, got {type(data).__name__}"
            )
            return None
        return data

    def list_files(self, pattern: str) -> List[Path]:
        """Sorted files under the registry directory matching ``pattern``."""
        if not self.registry_dir.exists():
            return []
        return sorted(self.registry_dir.glob(pattern))
