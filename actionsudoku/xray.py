"""The x-ray stomach that holds eaten digits."""

from __future__ import annotations

from typing import Any
from xml.etree.ElementTree import Element

from actionsudoku.item import Item, _int_attr


class Xray(Item):
    """Holds up to a fixed number of eaten digits."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.capacity = 0
        self.items: list[Item] = []
        self.show_message = False

    def xml_load(self, item_node: Element, dec_node: Element, tile_height: float) -> None:
        """Load position, image and capacity from the level nodes."""
        super().xml_load(item_node, dec_node, tile_height)
        self.set_image("images/" + dec_node.get("image", "0"))
        self.capacity = _int_attr(dec_node, "capacity", self.capacity)

    def add_item(self, item: Item) -> bool:
        """Swallow an item if there is room; otherwise tell the game it is full."""
        if self.capacity > len(self.items):
            self.items.append(item)
            item.in_xray = True
            self.show_message = False
            return True
        self.show_message = True
        self.game.set_game_over(True)
        return False

    def remove_digit(self, item: Item) -> None:
        """Take an item out of the x-ray if it is there."""
        if item in self.items:
            self.items.remove(item)

    def accept(self, visitor: Any) -> None:
        visitor.visit_xray(self)