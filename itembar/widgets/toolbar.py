"""Toolbar widget: one row of boxes."""

import dataclasses

from ..layout.commands import Layout
from ..layout.toolbar import layout_toolbar
from ..models.config import WidgetConfig
from ..models.enums import ToolbarColorAttribute, ToolbarNumberAttribute
from ..models.palette import ToolbarColors
from .base import Widget


class Toolbar(Widget):
    """A row of max_items boxes, the first ones holding item images."""

    NUMBER_FIELDS = {
        ToolbarNumberAttribute.SELECTED_INDEX: "selected",
        ToolbarNumberAttribute.MAX_ITEMS: "max_items",
    }
    COLOR_FIELDS = {
        ToolbarColorAttribute.BOX_OUTLINE: "outline",
        ToolbarColorAttribute.BOX_SELECTED_OUTLINE: "selected_outline",
        ToolbarColorAttribute.BOX_BACKGROUND: "background",
    }

    def default_colors(self, config: WidgetConfig) -> ToolbarColors:
        return dataclasses.replace(config.toolbar_colors)

    def build_layout(self) -> Layout:
        return layout_toolbar(self._items, self._max_items, self._selected,
                              self.colors, self.show_tooltips)
