"""Reads a level description file and fills a game with its items."""

from __future__ import annotations

import os
import re
from typing import Any
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from actionsudoku.item import Item, _float_attr, _int_attr
from actionsudoku.pieces import Container, Digit, Given, TeamFeature
from actionsudoku.sparty import Sparty
from actionsudoku.xray import Xray

_IMAGE_DIR = "images/"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class LevelLoadError(Exception):
    """Raised when a level file cannot be read or refers to unknown declarations."""


def extract_level(filename: str) -> str:
    """Name of the level, taken from the character just before the file extension."""
    if not filename:
        return "Unknown"
    if len(filename) < 5:
        return "Unknown"
    return "Level " + filename[-5]


def _atoi(text: str) -> int:
    """Leading integer of text, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class LevelLoad:
    """Loads one level file into a game, clearing what the game held before."""

    def __init__(self, filename: str | os.PathLike[str], game: Any) -> None:
        self.game = game
        self.width = 0.0
        self.height = 0.0
        self.tile_width = 0.0
        self.tile_height = 0.0
        self.col = 0
        self.row = 0
        self.solution = ""
        self.level = ""
        self.declarations: dict[str, Element] = {}

        name = os.fspath(filename)
        try:
            root = ElementTree.parse(name).getroot()
        except (OSError, ElementTree.ParseError) as exc:
            raise LevelLoadError(f"unable to load level file {name!r}") from exc

        game.clear()

        self.width = _float_attr(root, "width", 0.0)
        self.height = _float_attr(root, "height", 0.0)
        self.tile_width = _float_attr(root, "tilewidth", 0.0)
        self.tile_height = _float_attr(root, "tileheight", 0.0)

        for node in root:
            if node.tag == "declarations":
                self.xml_declaration(node)
            elif node.tag == "items":
                self.xml_item(node)
            elif node.tag == "game":
                self.xml_game(node)

        self.level = extract_level(name)

    def xml_game(self, node: Element) -> None:
        """Read the grid's top-left cell and the solution text."""
        self.col = _int_attr(node, "col", self.col)
        self.row = _int_attr(node, "row", self.row)
        self.solution = node.text or ""

    def xml_declaration(self, node: Element) -> None:
        """Remember every declaration by its id."""
        for child in node:
            self.declarations.setdefault(child.get("id", ""), child)

    def _make_item(self, kind: str, image: str) -> Item | None:
        if kind == "given":
            return Given(self.game, image)
        if kind == "digit":
            return Digit(self.game, image)
        if kind == "sparty":
            return Sparty(self.game)
        if kind in ("drowen", "background"):
            return Item(self.game, image)
        if kind == "xray":
            return Xray(self.game)
        if kind == "witch":
            return TeamFeature(self.game, image)
        return None

    def xml_item(self, node: Element) -> None:
        """Create the items listed under an items node and add them to the game."""
        background_seen = False
        for item_node in node:
            dec_node = self.declarations.get(item_node.get("id", ""))
            if dec_node is None:
                continue
            kind = item_node.tag
            if kind == "container":
                self.xml_container_item(item_node)
                continue
            if kind == "background" and not background_seen:
                self.game.pixel_height = _atoi(dec_node.get("height", "0"))
                self.game.pixel_width = _atoi(dec_node.get("width", "0"))
                background_seen = True
            item = self._make_item(kind, _IMAGE_DIR + dec_node.get("image", "0"))
            if item is None:
                continue
            self.game.add(item)
            if kind == "sparty":
                self.game.sparty = item
            item.xml_load(item_node, dec_node, self.tile_height)

    def _declaration(self, node: Element) -> Element:
        item_id = node.get("id", "")
        try:
            return self.declarations[item_id]
        except KeyError:
            raise LevelLoadError(f"no declaration with id {item_id!r}") from None

    def xml_container_item(self, node: Element) -> None:
        """Create a container and the digits held inside it."""
        dec_node = self._declaration(node)
        container = Container(self.game)
        self.game.add(container)
        container.xml_load(node, dec_node, self.tile_height)

        for child in node:
            if child.tag != "digit":
                continue
            digit_dec = self._declaration(child)
            digit = Digit(self.game, _IMAGE_DIR + digit_dec.get("image", "0"))
            self.game.add(digit)
            digit.xml_load(child, digit_dec, self.tile_height)
            container.add_item(digit)

    def pixel_width(self) -> int:
        """Width of the playing area in pixels."""
        return int(self.width * self.tile_width)

    def pixel_height(self) -> int:
        """Height of the playing area in pixels."""
        return int(self.height * self.tile_height)