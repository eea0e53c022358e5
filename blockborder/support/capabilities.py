"""Border capability queries for block types."""

from typing import Optional

from blockborder.support.models import BlockType, BorderSupport

BORDER_FEATURES = ("color", "radius", "style", "width")


def get_border_support(block_type: Optional[BlockType]):
    if block_type is None:
        return None
    return block_type.supports.border


def has_border_support(block_type: Optional[BlockType], feature: str = "any") -> bool:
    """Determine whether a block type supports a border feature.

    Args:
        block_type: Block type to check (None means unknown, unsupported)
        feature: One of color, radius, style, width, or "any"

    Returns:
        Whether there is support.
    """
    support = get_border_support(block_type)

    if support is True:
        return True

    if not isinstance(support, BorderSupport):
        return False

    if feature == "any":
        return any(getattr(support, name) for name in BORDER_FEATURES)

    if feature not in BORDER_FEATURES:
        return False
    return bool(getattr(support, feature))


def should_skip_serialization(block_type: Optional[BlockType]) -> bool:
    """Whether serialization of border classes and styles should be skipped."""
    support = get_border_support(block_type)
    return isinstance(support, BorderSupport) and support.skip_serialization


def should_show_border_by_default(block_type: Optional[BlockType]) -> bool:
    support = get_border_support(block_type)
    if not isinstance(support, BorderSupport) or support.default_controls is None:
        return False
    return support.default_controls.color or support.default_controls.width


def should_show_radius_by_default(block_type: Optional[BlockType]) -> bool:
    support = get_border_support(block_type)
    if not isinstance(support, BorderSupport) or support.default_controls is None:
        return False
    return support.default_controls.radius
