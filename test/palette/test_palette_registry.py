"""Unit tests for blockborder.palette.registry.PaletteRegistry."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from blockborder.exceptions import OriginNotFoundError
from blockborder.logger import DefaultLogger
from blockborder.palette import PaletteRegistry, get_multi_origin_color


@pytest.fixture
def palette_registry(palette_dir: Path, logger: DefaultLogger) -> PaletteRegistry:
    return PaletteRegistry(str(palette_dir), logger, origin_order=["default", "theme", "user"])


def test_origins_follow_configured_order(palette_registry: PaletteRegistry) -> None:
    assert palette_registry.list_origins() == ["default", "theme", "user"]


def test_reversed_order_changes_priority(palette_dir: Path, logger: DefaultLogger) -> None:
    registry = PaletteRegistry(str(palette_dir), logger, origin_order=["user", "theme", "default"])

    assert registry.list_origins() == ["user", "theme", "default"]
    resolved = get_multi_origin_color(registry.get_origins(), custom_color="#72aee6")
    assert resolved.slug == "theme-blue"


def test_get_origin_returns_colors(palette_registry: PaletteRegistry) -> None:
    user = palette_registry.get_origin("user")
    assert [color.slug for color in user.colors] == ["yellow", "brand-purple"]


def test_get_origin_missing_raises(palette_registry: PaletteRegistry) -> None:
    with pytest.raises(OriginNotFoundError) as exc_info:
        palette_registry.get_origin("custom")

    assert "custom" in str(exc_info.value)
    assert "default" in str(exc_info.value)
    assert palette_registry.find_origin("custom") is None


def test_missing_origin_file_is_skipped(palette_dir: Path, logger: DefaultLogger) -> None:
    registry = PaletteRegistry(str(palette_dir), logger, origin_order=["default", "custom"])

    assert registry.list_origins() == ["default"]
    assert registry.origin_exists("custom") is False


def test_invalid_origin_file_is_skipped(tmp_path: Path, logger: DefaultLogger) -> None:
    (tmp_path / "default.yaml").write_text(
        "colors:\n  - name: Black\n    slug: black\n    color: '#000000'\n"
    )
    (tmp_path / "theme.yaml").write_text(
        "colors:\n  - name: Bad\n    slug: bad\n    color: 'not a color!'\n"
    )
    (tmp_path / "user.yaml").write_text("- just\n- a list\n")

    registry = PaletteRegistry(str(tmp_path), logger, origin_order=["default", "theme", "user"])

    assert registry.list_origins() == ["default"]
    assert registry.get_origin("default").name == "default"


def test_origin_name_follows_file_name(tmp_path: Path, logger: DefaultLogger) -> None:
    (tmp_path / "theme.yaml").write_text("name: other\ncolors: []\n")

    registry = PaletteRegistry(str(tmp_path), logger, origin_order=["theme"])

    assert registry.list_origins() == ["theme"]


def test_missing_directory_loads_nothing(
    tmp_path: Path, logger: DefaultLogger, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        registry = PaletteRegistry(str(tmp_path / "nope"), logger, origin_order=["default"])

    assert registry.get_origins() == []
    assert caplog.records[0].context == {"registry": "palettes"}
