"""Block support and editor setting models."""

from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict


class DefaultControls(BaseModel):
    """Which border controls a block shows without the user adding them."""

    model_config = ConfigDict(frozen=True)

    color: bool = False
    radius: bool = False
    style: bool = False
    width: bool = False


class BorderSupport(BaseModel):
    """Per-feature border support declared by a block type."""

    model_config = ConfigDict(frozen=True)

    color: bool = False
    radius: bool = False
    style: bool = False
    width: bool = False
    skip_serialization: bool = False
    default_controls: Optional[DefaultControls] = None


class BlockSupports(BaseModel):
    """The ``supports`` section of a block type.

    ``border`` is either ``True`` for support of every border feature, or a
    BorderSupport listing the supported features.
    """

    model_config = ConfigDict(frozen=True)

    border: Union[bool, BorderSupport, None] = None


class BlockType(BaseModel):
    """A registered block type, as loaded from ``block.yaml``."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: Optional[str] = None
    supports: BlockSupports = BlockSupports()


BORDER_SETTING_PATHS = ("border.color", "border.radius", "border.style", "border.width")


class BorderSettings(BaseModel):
    """Editor-wide switches for the border tools.

    Every tool is off unless the theme enables it.
    """

    model_config = ConfigDict(frozen=True)

    color: bool = False
    radius: bool = False
    style: bool = False
    width: bool = False

    @classmethod
    def from_theme_settings(cls, settings: Optional[Dict]) -> "BorderSettings":
        """Build from a theme settings mapping such as ``{"border": {"color": true}}``."""
        border = (settings or {}).get("border") or {}
        return cls(**{key: bool(border.get(key, False)) for key in cls.model_fields})

    def is_setting_enabled(self, path: str) -> bool:
        """Look up a ``border.*`` setting; unknown paths are disabled."""
        if path not in BORDER_SETTING_PATHS:
            return False
        return getattr(self, path.split(".", 1)[1])

    def is_border_disabled(self) -> bool:
        """True only when every border setting is disabled."""
        return not any(self.is_setting_enabled(path) for path in BORDER_SETTING_PATHS)
