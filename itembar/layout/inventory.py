"""Wrapped grid inventory layout."""

import logging
from typing import Sequence, Tuple

from ..components.item import Item
from ..models.enums import FontSize
from ..models.palette import InventoryColors
from .commands import (
    BlitImage, DrawLine, DrawRect, FillRect, Layout, PrintText, SlotDraw, selected_index, slot_count,
)
from .text import right_align

logger = logging.getLogger(__name__)

IMAGE_SIZE = 16
PADDING = 1
SLOT_SIZE = IMAGE_SIZE + PADDING * 2
COLUMNS = 8
GRID_LEFT = 4
GRID_TOP = 14
TITLE_POS = (2, 2)
SEPARATOR_Y = 11
OUTSIDE_PADDING = 4
HEADER_BAND = 24


def inventory_canvas_size(viewport_width: int, viewport_height: int) -> Tuple[int, int]:
    """Panel size for a viewport: outer padding on every side and a band for the header."""
    width = viewport_width - OUTSIDE_PADDING * 2
    height = viewport_height - OUTSIDE_PADDING * 2 - HEADER_BAND
    return max(0, width), max(0, height)


def slot_position(index: int) -> Tuple[int, int]:
    """Top-left corner of an item image in the grid."""
    x = (index % COLUMNS) * SLOT_SIZE + GRID_LEFT
    y = (index // COLUMNS) * SLOT_SIZE + GRID_TOP
    return x, y


def layout_inventory(items: Sequence[Item], capacity: int, selected: int,
                     colors: InventoryColors, title: str,
                     canvas_width: int, canvas_height: int,
                     show_tooltips: bool = True) -> Layout:
    """
    Lay out an inventory panel: a titled header and an 8 column grid.

    Only slots holding an item draw anything. The selected item sits on a
    filled highlight square and its name is printed at the right of the
    header.
    """
    layout = Layout(canvas_width, canvas_height, background=colors.background)
    selection = selected_index(selected, len(items))

    layout.header.append(DrawRect(0, 0, canvas_width, canvas_height, colors.outline))
    layout.header.append(PrintText(title, *TITLE_POS, colors.text))
    layout.header.append(DrawLine(2, SEPARATOR_Y, canvas_width - 3, SEPARATOR_Y, colors.outline))
    if selection >= 0:
        layout.header.append(
            right_align(items[selection].name, canvas_width - 2, TITLE_POS[1], colors.text)
        )

    for index in range(slot_count(capacity)):
        x, y = slot_position(index)
        slot = SlotDraw(index, x - PADDING, y - PADDING, SLOT_SIZE)
        if index < len(items):
            item = items[index]
            if index == selection:
                slot.border_color = colors.selected_outline
                slot.commands.append(
                    FillRect(x - PADDING, y - PADDING, SLOT_SIZE, SLOT_SIZE,
                             colors.selected_outline)
                )
            slot.commands.append(BlitImage(item.image, x, y))
            if show_tooltips and item.tooltip:
                slot.commands.append(
                    right_align(item.tooltip, x + IMAGE_SIZE + PADDING,
                                y + IMAGE_SIZE - 5, colors.text, FontSize.SMALL)
                )
        layout.slots.append(slot)

    logger.debug("Inventory layout: %dx%d, %d slots, %d items, selected=%r",
                 canvas_width, canvas_height, len(layout.slots), len(items), selected)
    return layout
