from .canvas import Canvas, PygameCanvas
from .renderer import Renderer
from .host import WidgetSprite, Viewport, FixedViewport, DisplayViewport
from .icons import IconGenerator, IconKind, icons

__all__ = [
    'Canvas',
    'PygameCanvas',
    'Renderer',
    'WidgetSprite',
    'Viewport',
    'FixedViewport',
    'DisplayViewport',
    'IconGenerator',
    'IconKind',
    'icons',
]
