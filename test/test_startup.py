"""Tests for registry construction from configuration."""

from blockborder.startup import create_block_registry, create_palette_registry


def test_palette_registry_from_environment(monkeypatch, palette_dir, logger):
    monkeypatch.setenv("BLOCKBORDER_PALETTE_DIR", str(palette_dir))
    monkeypatch.setenv("BLOCKBORDER_ORIGIN_ORDER", "user,default")

    registry = create_palette_registry(logger=logger)

    assert registry.list_origins() == ["user", "default"]


def test_explicit_arguments_win(monkeypatch, palette_dir, logger, tmp_path):
    monkeypatch.setenv("BLOCKBORDER_PALETTE_DIR", str(tmp_path))

    registry = create_palette_registry(str(palette_dir), ["theme"], logger=logger)

    assert registry.list_origins() == ["theme"]


def test_block_registry_from_data_dir(monkeypatch, blocks_dir):
    monkeypatch.delenv("BLOCKBORDER_BLOCKS_DIR", raising=False)
    monkeypatch.delenv("BLOCKBORDER_LOG_LEVEL", raising=False)
    monkeypatch.setenv("BLOCKBORDER_DATA_DIR", str(blocks_dir.parent))

    registry = create_block_registry()

    assert "core/group" in registry.list_block_types()
