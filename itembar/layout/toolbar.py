"""Single row toolbar layout."""

import logging
from typing import Sequence

from ..components.item import Item
from ..models.enums import FontSize
from ..models.palette import ToolbarColors
from .commands import (
    BlitImage, DrawRect, FillRect, Layout, SlotDraw, selected_index, slot_count,
)
from .text import right_align

logger = logging.getLogger(__name__)

IMAGE_SIZE = 16
PADDING = 2
SLOT_SIZE = IMAGE_SIZE + PADDING * 2
STRIDE = SLOT_SIZE + PADDING
TOOLTIP_Y = SLOT_SIZE - 7


def toolbar_size(capacity: int):
    """Canvas (width, height) for a toolbar with the given capacity."""
    return max(0, STRIDE * slot_count(capacity) - PADDING), SLOT_SIZE


def layout_toolbar(items: Sequence[Item], capacity: int, selected: int,
                   colors: ToolbarColors, show_tooltips: bool = True) -> Layout:
    """
    Lay out a row of capacity boxes.

    Every slot gets a background and a border; the first len(items) slots
    also get their item's image. The border of the selected slot uses the
    selected outline colour, but only when selected points at an item.
    """
    width, height = toolbar_size(capacity)
    layout = Layout(width, height)
    selection = selected_index(selected, len(items))

    for index in range(slot_count(capacity)):
        x = STRIDE * index
        is_selected = index == selection
        border = colors.selected_outline if is_selected else colors.outline
        slot = SlotDraw(index, x, 0, SLOT_SIZE, border_color=border)

        slot.commands.append(FillRect(x, 0, SLOT_SIZE, SLOT_SIZE, colors.background))
        if index < len(items):
            item = items[index]
            slot.commands.append(BlitImage(item.image, x + PADDING, PADDING))
            if show_tooltips and item.tooltip:
                slot.commands.append(
                    right_align(item.tooltip, x + SLOT_SIZE, TOOLTIP_Y,
                                colors.outline, FontSize.SMALL)
                )
        slot.commands.append(DrawRect(x, 0, SLOT_SIZE, SLOT_SIZE, border))
        layout.slots.append(slot)

    logger.debug("Toolbar layout: %d slots, %d items, selected=%r",
                 len(layout.slots), len(items), selected)
    return layout
