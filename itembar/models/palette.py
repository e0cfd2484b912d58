"""Sixteen colour palette and per-widget colour defaults."""

import logging
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)


# Index 0 is transparent; the rest follow the arcade default palette.
PALETTE = (
    (0, 0, 0),          # 0 transparent
    (255, 255, 255),    # 1 white
    (255, 33, 33),      # 2 red
    (255, 147, 196),    # 3 pink
    (255, 129, 53),     # 4 orange
    (255, 246, 9),      # 5 yellow
    (36, 156, 163),     # 6 teal
    (120, 220, 82),     # 7 green
    (0, 63, 173),       # 8 blue
    (135, 242, 255),    # 9 light blue
    (142, 46, 196),     # 10 purple
    (164, 131, 159),    # 11 light purple
    (92, 64, 108),      # 12 dark purple
    (229, 205, 196),    # 13 tan
    (145, 70, 61),      # 14 brown
    (0, 0, 0),          # 15 black
)

TRANSPARENT = 0


def palette_rgba(index: int) -> Tuple[int, int, int, int]:
    """RGBA tuple for a palette index. Indices wrap modulo 16; anything else is transparent."""
    try:
        index = int(index) % len(PALETTE)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Drawing unknown colour %r as transparent", index)
        index = TRANSPARENT
    alpha = 0 if index == TRANSPARENT else 255
    return (*PALETTE[index], alpha)


@dataclass
class ToolbarColors:
    """Colour indices used when drawing a toolbar."""
    outline: int = 12
    selected_outline: int = 5
    background: int = 13

    def to_dict(self) -> dict:
        return {
            "outline": self.outline,
            "selected_outline": self.selected_outline,
            "background": self.background,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ToolbarColors":
        return cls(
            outline=int(data.get("outline", 12)),
            selected_outline=int(data.get("selected_outline", 5)),
            background=int(data.get("background", 13)),
        )


@dataclass
class InventoryColors:
    """Colour indices used when drawing an inventory panel."""
    outline: int = 12
    selected_outline: int = 5
    background: int = 13
    text: int = 12

    def to_dict(self) -> dict:
        return {
            "outline": self.outline,
            "selected_outline": self.selected_outline,
            "background": self.background,
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InventoryColors":
        return cls(
            outline=int(data.get("outline", 12)),
            selected_outline=int(data.get("selected_outline", 5)),
            background=int(data.get("background", 13)),
            text=int(data.get("text", 12)),
        )
