"""Item record shown in toolbars and inventories."""

from dataclasses import dataclass
from typing import Any, Optional

from ..models.enums import ItemTextAttribute


@dataclass(eq=False)
class Item:
    """
    A single image plus some text.

    The image should be 16x16; anything else is drawn as-is and will not line
    up with the slot grid. Widgets hold items by reference, so an item (and
    its image) may sit in several widgets at once.
    """

    name: str
    image: Any
    description: Optional[str] = ""
    tooltip: str = ""

    def __post_init__(self):
        if self.description is None:
            self.description = ""
        if self.tooltip is None:
            self.tooltip = ""

    def set_text(self, attribute: ItemTextAttribute, value: str) -> None:
        """Set the name, description or tooltip. Unknown attributes are ignored."""
        if attribute == ItemTextAttribute.NAME:
            self.name = value
        elif attribute == ItemTextAttribute.DESCRIPTION:
            self.description = value
        elif attribute == ItemTextAttribute.TOOLTIP:
            self.tooltip = value

    def get_text(self, attribute: ItemTextAttribute) -> str:
        """Get the name, description or tooltip, or "" for unknown attributes."""
        if attribute == ItemTextAttribute.NAME:
            return self.name
        elif attribute == ItemTextAttribute.DESCRIPTION:
            return self.description
        elif attribute == ItemTextAttribute.TOOLTIP:
            return self.tooltip
        return ""

    def set_image(self, new_image: Any) -> None:
        self.image = new_image

    def get_image(self) -> Any:
        return self.image
