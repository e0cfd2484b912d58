"""Attribute kinds and font selectors."""

from enum import Enum, auto


class ToolbarColorAttribute(Enum):
    """Colourable parts of a toolbar."""
    BOX_OUTLINE = auto()
    BOX_SELECTED_OUTLINE = auto()
    BOX_BACKGROUND = auto()


class InventoryColorAttribute(Enum):
    """Colourable parts of an inventory panel."""
    INVENTORY_OUTLINE = auto()
    INVENTORY_SELECTED_OUTLINE = auto()
    INVENTORY_BACKGROUND = auto()
    INVENTORY_TEXT = auto()


class ToolbarNumberAttribute(Enum):
    """Numeric toolbar properties."""
    SELECTED_INDEX = auto()
    MAX_ITEMS = auto()


class InventoryNumberAttribute(Enum):
    """Numeric inventory properties."""
    SELECTED_INDEX = auto()
    MAX_ITEMS = auto()


class ItemTextAttribute(Enum):
    """Text fields of an item."""
    NAME = auto()
    DESCRIPTION = auto()
    TOOLTIP = auto()


class FontSize(Enum):
    """Font selector passed through to the canvas."""
    STANDARD = auto()
    SMALL = auto()

    @property
    def pixel_size(self) -> int:
        """Point size used when rendering with pygame's default font."""
        sizes = {
            FontSize.STANDARD: 10,
            FontSize.SMALL: 8,
        }
        return sizes[self]
