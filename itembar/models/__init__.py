from .enums import (
    ToolbarColorAttribute,
    InventoryColorAttribute,
    ToolbarNumberAttribute,
    InventoryNumberAttribute,
    ItemTextAttribute,
    FontSize,
)
from .palette import PALETTE, palette_rgba, ToolbarColors, InventoryColors
from .config import WidgetConfig

__all__ = [
    'ToolbarColorAttribute',
    'InventoryColorAttribute',
    'ToolbarNumberAttribute',
    'InventoryNumberAttribute',
    'ItemTextAttribute',
    'FontSize',
    'PALETTE',
    'palette_rgba',
    'ToolbarColors',
    'InventoryColors',
    'WidgetConfig',
]
