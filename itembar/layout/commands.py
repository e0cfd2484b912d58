"""Draw commands produced by the layout engine."""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from ..models.enums import FontSize


@dataclass(frozen=True)
class FillRect:
    x: int
    y: int
    width: int
    height: int
    color: int


@dataclass(frozen=True)
class DrawRect:
    """One pixel rectangle outline."""
    x: int
    y: int
    width: int
    height: int
    color: int


@dataclass(frozen=True)
class DrawLine:
    x0: int
    y0: int
    x1: int
    y1: int
    color: int


@dataclass(frozen=True)
class PrintText:
    text: str
    x: int
    y: int
    color: int
    font: FontSize = FontSize.STANDARD


@dataclass(frozen=True, eq=False)
class BlitImage:
    """Copy an image onto the canvas, skipping transparent pixels."""
    image: Any
    x: int
    y: int


DrawCommand = Union[FillRect, DrawRect, DrawLine, PrintText, BlitImage]


def slot_count(capacity) -> int:
    """Number of slots drawn for a capacity: every index below it, or 0 when it is not a number."""
    try:
        return max(0, math.ceil(capacity))
    except (TypeError, ValueError, OverflowError):
        return 0


def selected_index(selected, item_count: int) -> int:
    """The selected item index, or -1 when selected does not point at an item."""
    try:
        if selected != int(selected):
            return -1
        index = int(selected)
    except (TypeError, ValueError, OverflowError):
        return -1
    return index if 0 <= index < item_count else -1


@dataclass
class SlotDraw:
    """Everything drawn for one grid slot, in draw order."""
    index: int
    x: int
    y: int
    size: int
    commands: List[DrawCommand] = field(default_factory=list)
    border_color: Optional[int] = None

    def contains(self, px: int, py: int) -> bool:
        return self.x <= px < self.x + self.size and self.y <= py < self.y + self.size


@dataclass
class Layout:
    """A complete frame: canvas size, header chrome and per-slot commands."""
    width: int
    height: int
    background: Optional[int] = None
    header: List[DrawCommand] = field(default_factory=list)
    slots: List[SlotDraw] = field(default_factory=list)

    @property
    def commands(self) -> List[DrawCommand]:
        """All commands in the order they must be drawn."""
        commands = list(self.header)
        for slot in self.slots:
            commands.extend(slot.commands)
        return commands

    def slot_at(self, x: int, y: int) -> int:
        """Index of the slot under a canvas point, or -1."""
        for slot in self.slots:
            if slot.contains(x, y):
                return slot.index
        return -1
