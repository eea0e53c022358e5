"""Startup helpers: build registries from configuration."""

from typing import Optional, Sequence

from blockborder.config import Config
from blockborder.logger import DefaultLogger, Logger
from blockborder.palette.registry import PaletteRegistry
from blockborder.support.registry import BlockTypeRegistry


def create_logger() -> Logger:
    """Logger at the configured BLOCKBORDER_LOG_LEVEL."""
    return DefaultLogger(level=Config.get_log_level())


def create_palette_registry(
    palette_dir: Optional[str] = None,
    origin_order: Optional[Sequence[str]] = None,
    logger: Optional[Logger] = None,
) -> PaletteRegistry:
    """Load the palette, falling back to configuration for anything not given."""
    return PaletteRegistry(
        palette_dir or str(Config.get_palette_dir()),
        logger or create_logger(),
        origin_order=origin_order or Config.get_origin_order(),
    )


def create_block_registry(
    blocks_dir: Optional[str] = None, logger: Optional[Logger] = None
) -> BlockTypeRegistry:
    return BlockTypeRegistry(blocks_dir or str(Config.get_blocks_dir()), logger or create_logger())
