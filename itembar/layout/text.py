"""Right-aligned text placement."""

from ..models.enums import FontSize
from .commands import PrintText

# Both fonts advance 6px per glyph, whatever the glyph.
GLYPH_ADVANCE = 6


def text_width(text: str) -> int:
    return len(text) * GLYPH_ADVANCE


def right_align(text: str, right_edge_x: int, y: int, color: int,
                font: FontSize = FontSize.STANDARD) -> PrintText:
    """
    Place text so that it ends at right_edge_x.

    No clamping: long text simply starts left of the canvas.
    """
    return PrintText(text, right_edge_x - text_width(text), y, color, font)
