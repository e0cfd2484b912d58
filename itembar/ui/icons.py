"""Procedural 16x16 pixel art item icons."""

from enum import Enum, auto
from typing import Dict, Tuple

import pygame

from ..models.palette import PALETTE

ICON_SIZE = 16


class IconKind(Enum):
    """Shapes the generator knows how to draw."""
    SWORD = auto()
    ARMOR = auto()
    RING = auto()
    POTION = auto()


# (main, dark, light) palette indices per icon
ICON_SCHEMES = {
    IconKind.SWORD: (11, 12, 1),
    IconKind.ARMOR: (6, 8, 9),
    IconKind.RING: (5, 4, 1),
    IconKind.POTION: (2, 14, 3),
}


class IconGenerator:
    """Generates small item icons, cached by kind."""

    def __init__(self):
        self.cache: Dict[str, pygame.Surface] = {}

    def get_or_create(self, key: str, creator_func, *args) -> pygame.Surface:
        """Get cached icon or create new one."""
        if key not in self.cache:
            self.cache[key] = creator_func(*args)
        return self.cache[key]

    def create_icon(self, kind: IconKind) -> pygame.Surface:
        key = f"icon_{kind.name}"
        return self.get_or_create(key, self._create_icon_impl, kind)

    def _create_icon_impl(self, kind: IconKind) -> pygame.Surface:
        surf = pygame.Surface((ICON_SIZE, ICON_SIZE), pygame.SRCALPHA)
        main, dark, light = (PALETTE[i] for i in ICON_SCHEMES[kind])

        if kind == IconKind.SWORD:
            self._draw_sword(surf, main, dark, light)
        elif kind == IconKind.ARMOR:
            self._draw_armor(surf, main, dark, light)
        elif kind == IconKind.RING:
            self._draw_ring(surf, main, dark, light)
        else:
            self._draw_potion(surf, main, dark, light)

        return surf

    def _draw_sword(self, surf: pygame.Surface, main: Tuple, dark: Tuple, light: Tuple):
        # Diagonal blade from top-right down to the guard
        pygame.draw.line(surf, main, (13, 2), (6, 9), 2)
        pygame.draw.line(surf, light, (13, 2), (7, 8), 1)
        # Guard
        pygame.draw.line(surf, dark, (3, 8), (7, 12), 2)
        # Handle and pommel
        pygame.draw.line(surf, PALETTE[14], (5, 10), (3, 12), 2)
        surf.set_at((2, 13), main)

    def _draw_armor(self, surf: pygame.Surface, main: Tuple, dark: Tuple, light: Tuple):
        body_points = [(2, 3), (13, 3), (13, 8), (11, 14), (4, 14), (2, 8)]
        pygame.draw.polygon(surf, main, body_points)
        pygame.draw.polygon(surf, dark, body_points, 1)
        # Neck opening
        pygame.draw.rect(surf, (0, 0, 0, 0), (6, 3, 4, 2))
        pygame.draw.line(surf, light, (4, 5), (5, 10), 1)
        pygame.draw.line(surf, dark, (8, 6), (8, 13), 1)

    def _draw_ring(self, surf: pygame.Surface, main: Tuple, dark: Tuple, light: Tuple):
        pygame.draw.ellipse(surf, dark, (3, 6, 10, 8))
        pygame.draw.ellipse(surf, main, (4, 7, 8, 6), 1)
        # Gem on top
        pygame.draw.circle(surf, light, (8, 5), 2)
        surf.set_at((7, 4), (255, 255, 255))

    def _draw_potion(self, surf: pygame.Surface, main: Tuple, dark: Tuple, light: Tuple):
        # Bottle body
        pygame.draw.ellipse(surf, main, (3, 7, 10, 8))
        pygame.draw.ellipse(surf, dark, (3, 7, 10, 8), 1)
        # Neck and cork
        pygame.draw.rect(surf, PALETTE[13], (6, 3, 4, 4))
        pygame.draw.rect(surf, PALETTE[14], (6, 1, 4, 2))
        # Liquid highlight
        surf.set_at((5, 9), light)
        surf.set_at((6, 9), light)


# Global icon generator instance
icons = IconGenerator()
