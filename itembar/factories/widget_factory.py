"""Shorthand constructors for items and widgets."""

from typing import Any, List, Optional

from ..components.item import Item
from ..widgets.inventory import Inventory
from ..widgets.toolbar import Toolbar


def create_item(name: str, image: Any, description: Optional[str] = None,
                tooltip: str = "") -> Item:
    """Create a simple item. The image must be 16x16 to line up with the slots."""
    return Item(name, image, description, tooltip)


def create_toolbar(items: Optional[List[Item]] = None, max_items: int = 3, **kwargs) -> Toolbar:
    return Toolbar(items, max_items, **kwargs)


def create_inventory(items: Optional[List[Item]] = None, max_items: int = 3, **kwargs) -> Inventory:
    return Inventory(items, max_items, **kwargs)
