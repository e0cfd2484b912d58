"""itembar - toolbar and inventory widgets for pixel art games."""

from .components import Item
from .models import (
    ToolbarColorAttribute,
    InventoryColorAttribute,
    ToolbarNumberAttribute,
    InventoryNumberAttribute,
    ItemTextAttribute,
    FontSize,
    ToolbarColors,
    InventoryColors,
    WidgetConfig,
)
from .layout import layout_toolbar, layout_inventory, right_align
from .widgets import Toolbar, Inventory
from .factories import create_item, create_toolbar, create_inventory

__all__ = [
    'Item',
    'ToolbarColorAttribute',
    'InventoryColorAttribute',
    'ToolbarNumberAttribute',
    'InventoryNumberAttribute',
    'ItemTextAttribute',
    'FontSize',
    'ToolbarColors',
    'InventoryColors',
    'WidgetConfig',
    'layout_toolbar',
    'layout_inventory',
    'right_align',
    'Toolbar',
    'Inventory',
    'create_item',
    'create_toolbar',
    'create_inventory',
]
