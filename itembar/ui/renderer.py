"""Replays a layout onto a canvas."""

import logging
from typing import Any, Callable, Optional

from ..layout.commands import BlitImage, DrawLine, DrawRect, FillRect, Layout, PrintText
from .canvas import Canvas, PygameCanvas

logger = logging.getLogger(__name__)


class Renderer:
    """Turns layouts into bitmaps using a fresh canvas per frame."""

    def __init__(self, canvas_factory: Optional[Callable[[], Canvas]] = None):
        self.canvas_factory = canvas_factory or PygameCanvas

    def render(self, layout: Layout) -> Any:
        """Draw every command of the layout and return the canvas bitmap."""
        canvas = self.canvas_factory()
        canvas.allocate(layout.width, layout.height)
        if layout.background is not None:
            canvas.fill(layout.background)

        for command in layout.commands:
            self._draw(canvas, command)

        return canvas.image

    def _draw(self, canvas: Canvas, command) -> None:
        if isinstance(command, FillRect):
            canvas.fill_rect(command.x, command.y, command.width, command.height, command.color)
        elif isinstance(command, DrawRect):
            canvas.draw_rect(command.x, command.y, command.width, command.height, command.color)
        elif isinstance(command, DrawLine):
            canvas.draw_line(command.x0, command.y0, command.x1, command.y1, command.color)
        elif isinstance(command, PrintText):
            canvas.print_text(command.text, command.x, command.y, command.color, command.font)
        elif isinstance(command, BlitImage):
            canvas.blit(command.image, command.x, command.y)
        else:
            logger.debug("Skipping unknown draw command: %r", command)
