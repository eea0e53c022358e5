"""Centralized configuration and defaults for blockborder.

This module documents all configuration options and their environment
variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Data locations
# --------------
# BLOCKBORDER_DATA_DIR: Base directory for palette and block data (default: ./data)
# BLOCKBORDER_PALETTE_DIR: Directory of <origin>.yaml palette files
#   (default: {DATA_DIR}/palettes)
# BLOCKBORDER_BLOCKS_DIR: Directory of <block>/block.yaml definitions
#   (default: {DATA_DIR}/blocks)
#
# Palette
# -------
# BLOCKBORDER_ORIGIN_ORDER: Comma separated origin lookup order
#   (default: default,theme,user)
#
# Development & Testing
# ---------------------
# BLOCKBORDER_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

import logging
import os
from pathlib import Path
from typing import List

from blockborder.exceptions import ConfigurationError

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

ENV_PREFIX = "BLOCKBORDER"

DEFAULT_DATA_DIR = "data"
DEFAULT_ORIGIN_ORDER = ("default", "theme", "user")
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_WIDTH_UNIT = "px"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}_{name}", "").strip()


class Config:
    """Read-only view over the environment with documented defaults."""

    @classmethod
    def get_data_dir(cls) -> Path:
        return Path(_env("DATA_DIR") or DEFAULT_DATA_DIR)

    @classmethod
    def get_palette_dir(cls) -> Path:
        override = _env("PALETTE_DIR")
        return Path(override) if override else cls.get_data_dir() / "palettes"

    @classmethod
    def get_blocks_dir(cls) -> Path:
        override = _env("BLOCKS_DIR")
        return Path(override) if override else cls.get_data_dir() / "blocks"

    @classmethod
    def get_origin_order(cls) -> List[str]:
        raw = _env("ORIGIN_ORDER")
        if not raw:
            return list(DEFAULT_ORIGIN_ORDER)

        origins = [part.strip() for part in raw.split(",") if part.strip()]
        if not origins:
            raise ConfigurationError(
                f"{ENV_PREFIX}_ORIGIN_ORDER must name at least one origin, got {raw!r}"
            )
        if len(set(origins)) != len(origins):
            raise ConfigurationError(
                f"{ENV_PREFIX}_ORIGIN_ORDER contains duplicate origins: {raw!r}",
                details={"origins": origins},
            )
        return origins

    @classmethod
    def get_log_level(cls) -> int:
        name = (_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        if name not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid {ENV_PREFIX}_LOG_LEVEL '{name}'. Valid levels: {', '.join(VALID_LOG_LEVELS)}"
            )
        return getattr(logging, name)


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Returns:
        Dictionary with current configuration values
    """
    return {
        "data_dir": str(Config.get_data_dir()),
        "palette_dir": str(Config.get_palette_dir()),
        "blocks_dir": str(Config.get_blocks_dir()),
        "origin_order": Config.get_origin_order(),
        "log_level": logging.getLevelName(Config.get_log_level()),
    }
