"""Block support capabilities and editor border settings."""
from blockborder.support.capabilities import (
    has_border_support,
    should_show_border_by_default,
    should_show_radius_by_default,
    should_skip_serialization,
)
from blockborder.support.models import (
    BlockSupports,
    BlockType,
    BorderSettings,
    BorderSupport,
    DefaultControls,
)
from blockborder.support.registry import BlockTypeRegistry

__all__ = [
    "BlockSupports",
    "BlockType",
    "BlockTypeRegistry",
    "BorderSettings",
    "BorderSupport",
    "DefaultControls",
    "has_border_support",
    "should_show_border_by_default",
    "should_show_radius_by_default",
    "should_skip_serialization",
]
