"""Drawing surfaces the renderer can target."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import pygame

from ..models.enums import FontSize
from ..models.palette import palette_rgba

logger = logging.getLogger(__name__)


class Canvas(ABC):
    """
    The primitive drawing operations a widget needs from its host.

    Colours are palette indices; fonts are FontSize selectors.
    """

    @abstractmethod
    def allocate(self, width: int, height: int) -> None:
        """Start a new, fully transparent bitmap."""
        pass

    @abstractmethod
    def fill(self, color: int) -> None:
        pass

    @abstractmethod
    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        pass

    @abstractmethod
    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        pass

    @abstractmethod
    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        pass

    @abstractmethod
    def print_text(self, text: str, x: int, y: int, color: int, font: FontSize) -> None:
        pass

    @abstractmethod
    def blit(self, image: Any, x: int, y: int) -> None:
        pass

    @property
    @abstractmethod
    def image(self) -> Any:
        """The finished bitmap."""
        pass


class PygameCanvas(Canvas):
    """Canvas backed by a per-pixel alpha pygame.Surface."""

    def __init__(self):
        self._surface = pygame.Surface((0, 0), pygame.SRCALPHA)

    @staticmethod
    def get_font(font: FontSize) -> pygame.font.Font:
        """Create a font for this draw; fonts do not survive pygame.quit()."""
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, font.pixel_size)

    def allocate(self, width: int, height: int) -> None:
        self._surface = pygame.Surface((max(0, width), max(0, height)), pygame.SRCALPHA)

    def fill(self, color: int) -> None:
        self._surface.fill(palette_rgba(color))

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        if width <= 0 or height <= 0:
            return
        self._surface.fill(palette_rgba(color), pygame.Rect(x, y, width, height))

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        if width <= 0 or height <= 0:
            return
        pygame.draw.rect(self._surface, palette_rgba(color), (x, y, width, height), 1)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        pygame.draw.line(self._surface, palette_rgba(color), (x0, y0), (x1, y1), 1)

    def print_text(self, text: str, x: int, y: int, color: int, font: FontSize) -> None:
        if not text:
            return
        rendered = self.get_font(font).render(text, False, palette_rgba(color)[:3])
        self._surface.blit(rendered, (x, y))

    def blit(self, image: Any, x: int, y: int) -> None:
        if image is None:
            logger.debug("Skipping blit of missing image at (%d, %d)", x, y)
            return
        self._surface.blit(image, (x, y))

    @property
    def image(self) -> pygame.Surface:
        return self._surface
