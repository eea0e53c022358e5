"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a sample multi-origin palette, the
bundled mock palette and block directories, and a logger.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from blockborder.logger import DefaultLogger
from blockborder.palette import Color, ColorOrigin

TEST_DATA_DIR = Path(__file__).parent / "data"


# ============================================================================
# PALETTE FIXTURES
# ============================================================================


@pytest.fixture
def origins():
    """Default, theme and user origins, in lookup order.

    ``#72aee6`` appears in both default (blue) and theme (theme-blue), and the
    slug ``red`` appears in both default and theme, to exercise first-match
    priority.
    """
    return [
        ColorOrigin(
            name="default",
            colors=[
                Color(name="Gray", slug="gray", color="#f6f7f7"),
                Color(name="Blue", slug="blue", color="#72aee6"),
                Color(name="Red", slug="red", color="#e65054"),
            ],
        ),
        ColorOrigin(
            name="theme",
            colors=[
                Color(name="Theme Blue", slug="theme-blue", color="#72aee6"),
                Color(name="Green", slug="green", color="#00a32a"),
                Color(name="Theme Red", slug="red", color="#ff0000"),
            ],
        ),
        ColorOrigin(
            name="user",
            colors=[Color(name="Yellow", slug="yellow", color="#bd8600")],
        ),
    ]


@pytest.fixture
def palette_dir() -> Path:
    """Absolute path to the bundled mock palette directory."""
    return TEST_DATA_DIR / "palettes"


@pytest.fixture
def blocks_dir() -> Path:
    """Absolute path to the bundled mock block definitions."""
    return TEST_DATA_DIR / "blocks"


@pytest.fixture
def logger() -> DefaultLogger:
    return DefaultLogger(name="blockborder.test")
