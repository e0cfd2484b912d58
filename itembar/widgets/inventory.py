"""Inventory widget: a titled panel with an 8 column grid."""

import dataclasses
from typing import List, Optional

from ..components.item import Item
from ..layout.commands import Layout
from ..layout.inventory import inventory_canvas_size, layout_inventory
from ..models.config import WidgetConfig
from ..models.enums import InventoryColorAttribute, InventoryNumberAttribute
from ..models.palette import InventoryColors
from ..ui.host import DisplayViewport, Viewport
from .base import Widget


class Inventory(Widget):
    """
    A panel sized to the viewport, with a title, a separator and a grid.

    The panel is re-sized from the viewport on every redraw, so resizing the
    window only takes effect on the next mutation (or an explicit update()).
    """

    NUMBER_FIELDS = {
        InventoryNumberAttribute.SELECTED_INDEX: "selected",
        InventoryNumberAttribute.MAX_ITEMS: "max_items",
    }
    COLOR_FIELDS = {
        InventoryColorAttribute.INVENTORY_OUTLINE: "outline",
        InventoryColorAttribute.INVENTORY_SELECTED_OUTLINE: "selected_outline",
        InventoryColorAttribute.INVENTORY_BACKGROUND: "background",
        InventoryColorAttribute.INVENTORY_TEXT: "text",
    }

    def __init__(self, items: Optional[List[Item]] = None, max_items: int = 3,
                 viewport: Optional[Viewport] = None, text: Optional[str] = None,
                 **kwargs):
        self.viewport = viewport or DisplayViewport()
        config = kwargs.get("config") or WidgetConfig()
        kwargs["config"] = config
        self._text = text if text is not None else config.inventory_title
        super().__init__(items, max_items, **kwargs)

    def default_colors(self, config: WidgetConfig) -> InventoryColors:
        return dataclasses.replace(config.inventory_colors)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, new_text: str) -> None:
        self._text = new_text
        self.update()

    def get_text(self) -> str:
        return self.text

    def set_text(self, new_text: str) -> None:
        self.text = new_text

    def build_layout(self) -> Layout:
        width, height = inventory_canvas_size(*self.viewport.size())
        return layout_inventory(self._items, self._max_items, self._selected,
                                self.colors, self._text, width, height,
                                self.show_tooltips)
