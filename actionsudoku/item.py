"""Base class for every item placed in the game."""

from __future__ import annotations

import os
from typing import Any
from xml.etree.ElementTree import Element

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


def _float_attr(node: Element, name: str, current: float) -> float:
    """Read a numeric attribute, keeping the current value when it is unusable."""
    raw = node.get(name, "0")
    try:
        return float(raw)
    except ValueError:
        return current


def _int_attr(node: Element, name: str, current: int) -> int:
    """Read an integer attribute, keeping the current value when it is unusable."""
    raw = node.get(name, "0")
    try:
        return int(raw)
    except ValueError:
        return current


class Item:
    """Anything drawn on the board: digits, givens, backgrounds and the rest."""

    def __init__(self, game: Any, filename: str | None = None) -> None:
        self.game = game
        self.image: pygame.Surface | None = None
        self.x = 0.0
        self.y = 0.0
        self.col = 0.0
        self.row = 0.0
        self.width = 0.0
        self.height = 0.0
        self.in_container = False
        self.in_xray = False
        if filename is not None:
            self.set_image(filename)

    def set_image(self, filename: str) -> None:
        """Load the image the item is drawn with."""
        self.image = pygame.image.load(os.fspath(filename))

    def set_location(self, x: float, y: float) -> None:
        """Move the item to (x, y)."""
        self.x = x
        self.y = y

    def _image_size(self) -> tuple[float, float] | None:
        if self.image is None:
            return None
        width, height = self.image.get_size()
        return float(width), float(height)

    def hit_test(self, x: int, y: int) -> bool:
        """True if (x, y) falls on the item's image, centred on its location."""
        size = self._image_size()
        if size is None:
            return False
        wid, hit = size
        test_x = x - self.x + wid / 2
        test_y = y - self.y + hit / 2
        return not (test_x < 0 or test_y < 0 or test_x >= wid + 1 or test_y >= hit + 1)

    def container_hit_test(self, x: int, y: int) -> bool:
        """Hit test used for headbutting, offset by the player's height."""
        size = self._image_size()
        if size is None:
            return False
        wid, hit = size
        test_x = x - self.x + wid / 2
        test_y = (y - self.y - self.game.sparty.height) / 2 + hit / 2
        return not (test_x < 0 or test_y < 0 or test_x >= wid + 1 or test_y >= hit + 1)

    def xml_load(self, item_node: Element, dec_node: Element, tile_height: float) -> None:
        """Place the item from its level node and size it from its declaration."""
        self.col = _float_attr(item_node, "col", self.col)
        self.row = _float_attr(item_node, "row", self.row)
        self.width = _float_attr(dec_node, "width", self.width)
        self.height = _float_attr(dec_node, "height", self.height)
        self.x = self.col * tile_height
        self.y = (self.row + 1) * tile_height - self.height

    def draw(self, surface: pygame.Surface, width: int, height: int) -> None:
        """Draw the item, shrunk when it sits in the x-ray."""
        if self.image is None:
            return
        draw_width, draw_height = self.width, self.height
        if self.in_xray:
            draw_width /= 1.5
            draw_height /= 1.5
        size = (max(int(draw_width), 0), max(int(draw_height), 0))
        scaled = pygame.transform.scale(self.image, size)
        surface.blit(scaled, (int(self.x), int(self.y)))

    def update(self, elapsed: float) -> None:
        """Advance animation by elapsed seconds; plain items do not move."""

    def mouth_move(self, moving: bool) -> None:
        """Start an eating motion; plain items have none."""

    def set_target_location(self, x: int, y: int) -> None:
        """Set a destination to walk to; plain items stay put."""

    def head_butt(self) -> None:
        """Start a headbutt; plain items have none."""

    def accept(self, visitor: Any) -> None:
        """Accept a visitor; plain items are of no interest to any visitor."""