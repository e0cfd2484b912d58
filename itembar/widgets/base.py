"""Shared widget state and attribute dispatch."""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from ..components.item import Item
from ..layout.commands import Layout
from ..models.config import WidgetConfig
from ..ui.host import WidgetSprite
from ..ui.renderer import Renderer

logger = logging.getLogger(__name__)


def _lookup(table: Dict[Enum, str], attribute: Any) -> Optional[str]:
    """Field name for an attribute kind, or None if the kind is not in the table."""
    try:
        return table.get(attribute)
    except TypeError:
        return None


class Widget(ABC):
    """
    Base class for item widgets.

    A widget owns its item list, selection, capacity and colours. Every
    mutation immediately re-runs layout and render and pushes the new bitmap
    to the host sprite. Nothing is validated: an out of range selection just
    draws no highlight and a capacity beyond the item count leaves empty slots.
    """

    # Attribute kind -> property name, filled in by subclasses
    NUMBER_FIELDS: Dict[Enum, str] = {}
    # Attribute kind -> field on the colour struct
    COLOR_FIELDS: Dict[Enum, str] = {}

    def __init__(self, items: Optional[List[Item]] = None, max_items: int = 3,
                 colors=None, config: Optional[WidgetConfig] = None,
                 renderer: Optional[Renderer] = None, sprite=None):
        self.config = config or WidgetConfig()
        self.colors = colors if colors is not None else self.default_colors(self.config)
        self.show_tooltips = self.config.show_tooltips
        self.renderer = renderer or Renderer()
        self.sprite = sprite if sprite is not None else WidgetSprite()

        self._items: List[Item] = items if items is not None else []
        self._selected: int = 0
        self._max_items: int = max_items

        self.layout: Optional[Layout] = None
        self.image: Any = None
        self.update()

    @abstractmethod
    def default_colors(self, config: WidgetConfig):
        """A fresh colour struct for this widget type."""
        pass

    @abstractmethod
    def build_layout(self) -> Layout:
        """Lay out the current state."""
        pass

    # ========== STATE ==========

    @property
    def selected(self) -> int:
        return self._selected

    @selected.setter
    def selected(self, index: int) -> None:
        self._selected = index
        self.update()

    @property
    def items(self) -> List[Item]:
        return self._items

    @items.setter
    def items(self, new_items: List[Item]) -> None:
        self._items = new_items
        self.update()

    def get_items(self) -> List[Item]:
        return self.items

    def set_items(self, new_items: List[Item]) -> None:
        self.items = new_items

    @property
    def max_items(self) -> int:
        return self._max_items

    @max_items.setter
    def max_items(self, new_max: int) -> None:
        self._max_items = new_max
        self.update()

    # ========== ATTRIBUTE DISPATCH ==========

    def set_number(self, attribute: Enum, value: int) -> None:
        """Set the selected index or max items. Unknown attributes are ignored."""
        name = _lookup(self.NUMBER_FIELDS, attribute)
        if name is None:
            logger.debug("%s ignoring unknown number attribute %r", type(self).__name__, attribute)
            return
        setattr(self, name, value)

    def get_number(self, attribute: Enum) -> int:
        """Get the selected index or max items, or -1 for unknown attributes."""
        name = _lookup(self.NUMBER_FIELDS, attribute)
        if name is None:
            return -1
        return getattr(self, name)

    def set_color(self, attribute: Enum, color: int) -> None:
        """Set the colour of one part of the widget, then redraw."""
        name = _lookup(self.COLOR_FIELDS, attribute)
        if name is None:
            logger.debug("%s ignoring unknown color attribute %r", type(self).__name__, attribute)
        else:
            setattr(self.colors, name, color)
        self.update()

    def get_color(self, attribute: Enum) -> int:
        """Get the colour of one part of the widget, or -1 for unknown attributes."""
        name = _lookup(self.COLOR_FIELDS, attribute)
        if name is None:
            return -1
        return getattr(self.colors, name)

    # ========== DRAWING ==========

    def update(self) -> Any:
        """Redraw the widget and hand the new image to the sprite."""
        self.layout = self.build_layout()
        self.image = self.renderer.render(self.layout)
        self.sprite.set_image(self.image)
        logger.debug("%s redrawn at %dx%d", type(self).__name__,
                     self.layout.width, self.layout.height)
        return self.image

    def slot_at(self, x: int, y: int) -> int:
        """Index of the slot under a point on the widget image, or -1."""
        if self.layout is None:
            return -1
        return self.layout.slot_at(x, y)
