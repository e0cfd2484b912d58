import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from itembar.components.item import Item
from itembar.ui.canvas import Canvas
from itembar.ui.host import FixedViewport
from itembar.ui.renderer import Renderer


class RecordingCanvas(Canvas):
    """Canvas that remembers every call instead of drawing."""

    def __init__(self):
        self.calls = []
        self.size = None

    def allocate(self, width, height):
        self.size = (width, height)
        self.calls = []

    def fill(self, color):
        self.calls.append(("fill", color))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def draw_rect(self, x, y, width, height, color):
        self.calls.append(("draw_rect", x, y, width, height, color))

    def draw_line(self, x0, y0, x1, y1, color):
        self.calls.append(("draw_line", x0, y0, x1, y1, color))

    def print_text(self, text, x, y, color, font):
        self.calls.append(("print_text", text, x, y, color, font))

    def blit(self, image, x, y):
        self.calls.append(("blit", image, x, y))

    @property
    def image(self):
        return self

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


class RecordingSprite:
    def __init__(self):
        self.images = []

    def set_image(self, image):
        self.images.append(image)


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def icon():
    return pygame.Surface((16, 16), pygame.SRCALPHA)


@pytest.fixture
def make_item():
    def _make(name="Thing", tooltip="", description=""):
        return Item(name, pygame.Surface((16, 16), pygame.SRCALPHA), description, tooltip)
    return _make


@pytest.fixture
def recording_renderer():
    return Renderer(RecordingCanvas)


@pytest.fixture
def sprite():
    return RecordingSprite()


@pytest.fixture
def viewport():
    return FixedViewport(160, 120)
