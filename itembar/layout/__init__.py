from .commands import (
    FillRect,
    DrawRect,
    DrawLine,
    PrintText,
    BlitImage,
    DrawCommand,
    SlotDraw,
    Layout,
)
from .text import right_align, text_width
from .toolbar import layout_toolbar, toolbar_size
from .inventory import layout_inventory, inventory_canvas_size, slot_position

__all__ = [
    'FillRect',
    'DrawRect',
    'DrawLine',
    'PrintText',
    'BlitImage',
    'DrawCommand',
    'SlotDraw',
    'Layout',
    'right_align',
    'text_width',
    'layout_toolbar',
    'toolbar_size',
    'layout_inventory',
    'inventory_canvas_size',
    'slot_position',
]
