"""Host-side capabilities: the sprite a widget draws into and the viewport size."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

import pygame

logger = logging.getLogger(__name__)

DEFAULT_SCREEN_SIZE = (160, 120)


class WidgetSprite(pygame.sprite.Sprite):
    """A plain pygame sprite whose image is replaced on every redraw."""

    def __init__(self, *groups):
        super().__init__(*groups)
        self.image = pygame.Surface((1, 1), pygame.SRCALPHA)
        self.rect = self.image.get_rect()

    def set_image(self, image: Any) -> None:
        """Swap the image, keeping the sprite centred where it was."""
        center = self.rect.center
        self.image = image
        self.rect = image.get_rect(center=center)


class Viewport(ABC):
    """Source of the screen size used to size inventory panels."""

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        pass

    @property
    def width(self) -> int:
        return self.size()[0]

    @property
    def height(self) -> int:
        return self.size()[1]


class FixedViewport(Viewport):
    def __init__(self, width: int = DEFAULT_SCREEN_SIZE[0], height: int = DEFAULT_SCREEN_SIZE[1]):
        self._size = (width, height)

    def size(self) -> Tuple[int, int]:
        return self._size


class DisplayViewport(Viewport):
    """The current pygame display, or the default screen size when none is open."""

    def __init__(self, fallback: Optional[Tuple[int, int]] = None):
        self.fallback = fallback or DEFAULT_SCREEN_SIZE

    def size(self) -> Tuple[int, int]:
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is None:
            logger.debug("No display surface, using fallback size %s", self.fallback)
            return self.fallback
        return surface.get_size()
