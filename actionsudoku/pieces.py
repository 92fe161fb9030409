"""The simple game pieces: digits, givens, containers and the level-3 helper."""

from __future__ import annotations

import math
from typing import Any
from xml.etree.ElementTree import Element

import pygame

from actionsudoku.item import Item, _int_attr

_TEAM_FEATURE_SPEED = 100.0


class Digit(Item):
    """A movable number that the player eats and places on the grid."""

    def __init__(self, game: Any, filename: str | None = None) -> None:
        super().__init__(game, filename)
        self.value = 0

    def xml_load(self, item_node: Element, dec_node: Element, tile_height: float) -> None:
        """Load position, size and the digit's value."""
        super().xml_load(item_node, dec_node, tile_height)
        self.value = _int_attr(dec_node, "value", self.value)

    def accept(self, visitor: Any) -> None:
        visitor.visit_digit(self)


class Given(Item):
    """A fixed number printed on the grid at the start of a level."""

    def __init__(self, game: Any, filename: str | None = None) -> None:
        super().__init__(game, filename)
        self.value = 0

    def xml_load(self, item_node: Element, dec_node: Element, tile_height: float) -> None:
        """Load position, size and the given's value."""
        super().xml_load(item_node, dec_node, tile_height)
        self.value = _int_attr(dec_node, "value", self.value)

    def accept(self, visitor: Any) -> None:
        visitor.visit_given(self)


class Container(Item):
    """A box holding digits until the player headbutts it open."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.contained_items: list[Item] = []
        self.front_image: pygame.Surface | None = None

    def xml_load(self, item_node: Element, dec_node: Element, tile_height: float) -> None:
        """Load position, size, back image and front image."""
        super().xml_load(item_node, dec_node, tile_height)
        self.set_image("images/" + dec_node.get("image", "0"))
        self.front_image = pygame.image.load("images/" + dec_node.get("front", "0"))

    def add_item(self, item: Item) -> None:
        """Put an item into the container."""
        self.contained_items.append(item)
        item.in_container = True

    def clear(self) -> None:
        """Forget every contained item."""
        self.contained_items.clear()

    def draw(self, surface: pygame.Surface, width: int, height: int) -> None:
        """Draw the back, then the contents, then the front over them."""
        super().draw(surface, width, height)
        for item in self.contained_items:
            item.draw(surface, width, height)
        if self.front_image is not None:
            surface.blit(self.front_image, (int(self.x), int(self.y)))

    def accept(self, visitor: Any) -> None:
        visitor.visit_container(self)


class TeamFeature(Item):
    """The helper that walks up to reveal a square on the last level."""

    def __init__(self, game: Any, filename: str | None = None) -> None:
        super().__init__(game, filename)
        self.target_x = 0.0
        self.target_y = 0.0
        self.moving = False

    def set_target_location(self, x: int, y: int) -> None:
        """Start walking towards (x, y)."""
        self.target_x = x
        self.target_y = y
        self.moving = True

    def update(self, elapsed: float) -> None:
        """Walk towards the target at a fixed speed."""
        if not self.moving:
            return
        dx = self.target_x - self.x
        dy = self.target_y - self.y
        distance = math.hypot(dx, dy)
        step = _TEAM_FEATURE_SPEED * elapsed
        if distance == 0 or distance < step:
            self.set_location(self.target_x, self.target_y)
            self.moving = False
        else:
            self.set_location(self.x + dx / distance * step, self.y + dy / distance * step)

    def accept(self, visitor: Any) -> None:
        visitor.visit_team_feature(self)