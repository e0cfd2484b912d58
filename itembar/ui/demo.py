"""Pygame window showing a toolbar and an inventory side by side."""

import logging
from typing import List

import pygame

from ..components.item import Item
from ..factories.widget_factory import create_inventory, create_item, create_toolbar
from ..models.config import WidgetConfig
from ..models.palette import PALETTE
from .host import DEFAULT_SCREEN_SIZE, FixedViewport
from .icons import IconKind, icons

logger = logging.getLogger(__name__)


class DemoUI:
    """Arcade-sized screen scaled up to a desktop window."""

    SCALE = 4
    FPS = 30
    CYCLE_SECONDS = 1.0

    def __init__(self, config: WidgetConfig = None):
        pygame.init()
        pygame.display.set_caption("itembar")

        width, height = DEFAULT_SCREEN_SIZE
        self.window = pygame.display.set_mode((width * self.SCALE, height * self.SCALE))
        self.screen = pygame.Surface((width, height))
        self.clock = pygame.time.Clock()
        self.config = config or WidgetConfig.load()

        self.items = self._make_items()
        self.toolbar = create_toolbar(self.items[:3], 4, config=self.config)
        self.inventory = create_inventory(
            self.items, 12, config=self.config,
            viewport=FixedViewport(width, height),
        )
        self.toolbar.sprite.rect.midbottom = (width // 2, height - 2)
        self.inventory.sprite.rect.topleft = (4, 4)
        self.sprites = pygame.sprite.Group(self.inventory.sprite, self.toolbar.sprite)

        self._cycle_timer = 0.0

    def _make_items(self) -> List[Item]:
        return [
            create_item("Sword", icons.create_icon(IconKind.SWORD), "Sharp.", tooltip="1"),
            create_item("Armor", icons.create_icon(IconKind.ARMOR), "Sturdy."),
            create_item("Ring", icons.create_icon(IconKind.RING), "Shiny.", tooltip="2"),
            create_item("Potion", icons.create_icon(IconKind.POTION), "Heals.", tooltip="3"),
        ] * 2

    def run(self) -> None:
        """Main loop."""
        running = True

        while running:
            dt = self.clock.tick(self.FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            self._update(dt)
            self._draw()
            pygame.display.flip()

        pygame.quit()

    def _update(self, dt: float) -> None:
        self._cycle_timer += dt
        if self._cycle_timer < self.CYCLE_SECONDS:
            return
        self._cycle_timer = 0.0
        self.toolbar.selected = (self.toolbar.selected + 1) % self.toolbar.max_items
        self.inventory.selected = (self.inventory.selected + 1) % len(self.inventory.items)

    def _draw(self) -> None:
        self.screen.fill(PALETTE[9])
        self.sprites.draw(self.screen)
        pygame.transform.scale(self.screen, self.window.get_size(), self.window)
