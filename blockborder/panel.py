"""Border panel controller for a single block.

Binds a block's persisted attributes to the border tools: decides which
controls are available, supplies the hydrated border to display, and turns
edits and resets into attribute patches handed to the attribute sink.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from blockborder.attributes import (
    BorderPatch,
    has_border_radius_value,
    has_border_value,
    reset_border,
    reset_border_filter,
    reset_border_radius,
    reset_border_radius_filter,
)
from blockborder.borders import dehydrate_border, hydrate_border
from blockborder.logger import Logger
from blockborder.palette.models import ColorOrigin
from blockborder.support import (
    BlockType,
    BorderSettings,
    has_border_support,
    should_show_border_by_default,
    should_show_radius_by_default,
)

AttributeSink = Callable[[Dict[str, Any]], None]


class BorderPanel:
    """Border tools state for one block."""

    def __init__(
        self,
        block_type: BlockType,
        attributes: Mapping[str, Any],
        settings: BorderSettings,
        origins: Sequence[ColorOrigin],
        set_attributes: AttributeSink,
        logger: Logger,
    ) -> None:
        """
        Initialize the panel.

        Args:
            block_type: Type of the block being edited
            attributes: The block's current persisted attributes
            settings: Editor border settings
            origins: Palette origins in lookup order
            set_attributes: Sink that merges a patch into the block's attributes
            logger: Logger instance
        """
        self.block_type = block_type
        self.attributes: Dict[str, Any] = dict(attributes)
        self.settings = settings
        self.origins = list(origins)
        self.set_attributes = set_attributes
        self.logger = logger

    def _supports(self, feature: str) -> bool:
        return self.settings.is_setting_enabled(f"border.{feature}") and has_border_support(
            self.block_type, feature
        )

    @property
    def is_visible(self) -> bool:
        return has_border_support(self.block_type) and not self.settings.is_border_disabled()

    @property
    def show_color(self) -> bool:
        return self._supports("color")

    @property
    def show_radius(self) -> bool:
        return self._supports("radius")

    @property
    def show_style(self) -> bool:
        return self._supports("style")

    @property
    def show_width(self) -> bool:
        return self._supports("width")

    @property
    def show_border_control(self) -> bool:
        return self.is_visible and (self.show_width or self.show_color)

    @property
    def show_radius_control(self) -> bool:
        return self.is_visible and self.show_radius

    @property
    def border_shown_by_default(self) -> bool:
        return bool(should_show_border_by_default(self.block_type))

    @property
    def radius_shown_by_default(self) -> bool:
        return bool(should_show_radius_by_default(self.block_type))

    @property
    def value(self) -> Optional[Dict[str, Any]]:
        """Border to display, with named colors resolved."""
        return hydrate_border(self.attributes, self.origins)

    def has_border_value(self) -> bool:
        return has_border_value(self.attributes)

    def has_radius_value(self) -> bool:
        return has_border_radius_value(self.attributes)

    def _apply(self, patch: BorderPatch, action: str) -> BorderPatch:
        update = patch.to_attributes()
        self.logger.debug(f"Applying border patch for {self.block_type.name}", action=action, patch=update)
        self.set_attributes(update)
        self.attributes = patch.apply_to(self.attributes)
        return patch

    def on_border_change(self, new_border: Optional[Mapping[str, Any]]) -> BorderPatch:
        """Persist an edit emitted by the border controls."""
        patch = dehydrate_border(new_border, self.attributes.get("style"), self.origins)
        return self._apply(patch, "change")

    def reset_border(self) -> BorderPatch:
        self.logger.info(f"Resetting border for {self.block_type.name}")
        return self._apply(reset_border(self.attributes), "reset_border")

    def reset_radius(self) -> BorderPatch:
        self.logger.info(f"Resetting border radius for {self.block_type.name}")
        return self._apply(reset_border_radius(self.attributes), "reset_radius")

    @staticmethod
    def reset_all_border_filter(attributes: Mapping[str, Any]) -> Dict[str, Any]:
        return reset_border_filter(attributes)

    @staticmethod
    def reset_all_radius_filter(attributes: Mapping[str, Any]) -> Dict[str, Any]:
        return reset_border_radius_filter(attributes)
