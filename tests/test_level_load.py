import pygame
import pytest
from xml.etree.ElementTree import Element, SubElement

from actionsudoku.item import Item
from actionsudoku.level_load import LevelLoad, LevelLoadError, extract_level
from actionsudoku.pieces import Container, Digit, Given
from actionsudoku.sparty import Sparty
from actionsudoku.visitor import DigitVisitor, ItemVisitor, TeamFeatureVisitor

TILE = 48
SOLUTION = "534678912 672195348"
IMAGES = [
    "given.png",
    "digit.png",
    "head.png",
    "body.png",
    "background.png",
    "xray.png",
    "box.png",
    "box-front.png",
    "witch.png",
]


class _Game:
    def __init__(self):
        self.items = []
        self.sparty = None
        self.pixel_width = 0
        self.pixel_height = 0

    def add(self, item):
        self.items.append(item)

    def clear(self):
        self.items.clear()

    def accept(self, visitor):
        for item in self.items:
            item.accept(visitor)


class _CountingVisitor(ItemVisitor):
    def __init__(self):
        self.givens = 0
        self.sparty = 0
        self.containers = 0
        self.xrays = 0

    def visit_given(self, given):
        self.givens += 1

    def visit_sparty(self, sparty):
        self.sparty += 1

    def visit_container(self, container):
        self.containers += 1

    def visit_xray(self, xray):
        self.xrays += 1


def _level_xml(width, height, givens, digits, container_digits=0, witch=False):
    declarations = f"""
    <given id="i1" image="given.png" width="48" height="48" value="5"/>
    <digit id="i2" image="digit.png" width="48" height="48" value="3"/>
    <sparty id="i3" image1="head.png" image2="body.png" width="96" height="96"
        front="1" head-pivot-angle="-0.5" head-pivot-x="48" head-pivot-y="60"
        mouth-pivot-angle="0.5" mouth-pivot-x="40" mouth-pivot-y="50"/>
    <background id="i4" image="background.png" width="{width * TILE}" height="{height * TILE}"/>
    <xray id="i5" image="xray.png" width="150" height="200" capacity="9"/>
    <container id="i6" image="box.png" front="box-front.png" width="96" height="96"/>
    <witch id="i7" image="witch.png" width="60" height="100"/>
    """
    parts = [f'<background id="i4" col="0" row="{height - 1}"/>']
    parts += [f'<given id="i1" col="{3 + n % 9}" row="{1 + n // 9}"/>' for n in range(givens)]
    parts += [f'<digit id="i2" col="{n % 5}" row="{n // 5}"/>' for n in range(digits)]
    parts.append('<sparty id="i3" col="2" row="5"/>')
    parts.append('<xray id="i5" col="0" row="9"/>')
    if container_digits:
        inner = "".join('<digit id="i2" col="14" row="10"/>' for _ in range(container_digits))
        parts.append(f'<container id="i6" col="14" row="10">{inner}</container>')
    if witch:
        parts.append('<witch id="i7" col="15" row="3"/>')
    return (
        f'<level width="{width}" height="{height}" tilewidth="{TILE}" tileheight="{TILE}">'
        f"<declarations>{declarations}</declarations>"
        f"<items>{''.join(parts)}</items>"
        f'<game col="3" row="1">{SOLUTION}</game>'
        "</level>"
    )


@pytest.fixture
def level_dir(tmp_path, monkeypatch):
    images = tmp_path / "images"
    images.mkdir()
    for name in IMAGES:
        surface = pygame.Surface((TILE, TILE), pygame.SRCALPHA)
        surface.fill((200, 30, 30, 255))
        pygame.image.save(surface, str(images / name))
    levels = tmp_path / "levels"
    levels.mkdir()
    (levels / "level1.xml").write_text(_level_xml(20, 15, 28, 53))
    (levels / "level2.xml").write_text(_level_xml(30, 20, 28, 53, container_digits=2))
    (levels / "level3.xml").write_text(_level_xml(20, 15, 2, 2, witch=True))
    (levels / "broken.xml").write_text("<level><items>")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_loading_items(level_dir):
    game = _Game()
    LevelLoad("levels/level1.xml", game)
    assert len(game.items) == 84

    LevelLoad("levels/level2.xml", game)
    assert len(game.items) == 87


def test_pixels(level_dir):
    game = _Game()
    level = LevelLoad("levels/level1.xml", game)
    assert level.pixel_height() == 720
    assert level.pixel_width() == 960

    level2 = LevelLoad("levels/level2.xml", game)
    assert level2.pixel_height() == 960
    assert level2.pixel_width() == 1440


def test_visitor_counts(level_dir):
    game = _Game()
    LevelLoad("levels/level1.xml", game)

    visitor = _CountingVisitor()
    game.accept(visitor)
    assert visitor.givens == 28
    digits = DigitVisitor()
    game.accept(digits)
    assert digits.digit_count == 53
    assert visitor.sparty == 1
    assert visitor.containers == 0
    assert visitor.xrays == 1


def test_extract_level():
    assert extract_level("levels/level1.xml") == "Level 1"
    assert extract_level("levels/level3.xml") == "Level 3"
    assert extract_level("") == "Unknown"


def test_game_node(level_dir):
    level = LevelLoad("levels/level1.xml", _Game())
    assert level.col == 3
    assert level.row == 1
    assert level.solution == SOLUTION
    assert level.level == "Level 1"
    assert level.tile_height == TILE


def test_missing_file_raises_and_keeps_items(level_dir):
    game = _Game()
    marker = Item(game)
    game.add(marker)
    with pytest.raises(LevelLoadError):
        LevelLoad("levels/nowhere.xml", game)
    assert game.items == [marker]


def test_malformed_file_raises(level_dir):
    with pytest.raises(LevelLoadError):
        LevelLoad("levels/broken.xml", _Game())


def test_background_sets_game_pixels(level_dir):
    game = _Game()
    level = LevelLoad("levels/level2.xml", game)
    assert game.pixel_width == level.pixel_width()
    assert game.pixel_height == level.pixel_height()


def test_sparty_registered(level_dir):
    game = _Game()
    LevelLoad("levels/level1.xml", game)
    assert isinstance(game.sparty, Sparty)
    assert game.sparty in game.items
    assert game.sparty.head_pivot_x == 48


def test_loaded_values_and_positions(level_dir):
    game = _Game()
    LevelLoad("levels/level1.xml", game)
    givens = [item for item in game.items if isinstance(item, Given)]
    digits = [item for item in game.items if isinstance(item, Digit)]
    assert {given.value for given in givens} == {5}
    assert {digit.value for digit in digits} == {3}
    first = givens[0]
    assert (first.x, first.y) == (144, 48)


def test_container_holds_its_digits(level_dir):
    game = _Game()
    LevelLoad("levels/level2.xml", game)
    containers = [item for item in game.items if isinstance(item, Container)]
    assert len(containers) == 1
    held = containers[0].contained_items
    assert len(held) == 2
    assert all(item.in_container for item in held)
    assert all(item in game.items for item in held)


def test_witch_is_team_feature(level_dir):
    game = _Game()
    LevelLoad("levels/level3.xml", game)
    visitor = TeamFeatureVisitor()
    game.accept(visitor)
    assert visitor.is_team_feature()


def test_unknown_declaration_skipped(level_dir):
    game = _Game()
    level = LevelLoad("levels/level1.xml", game)
    before = len(game.items)
    items = Element("items")
    SubElement(items, "given", {"id": "nope", "col": "1", "row": "1"})
    level.xml_item(items)
    assert len(game.items) == before


def test_container_with_unknown_digit_raises(level_dir):
    game = _Game()
    level = LevelLoad("levels/level1.xml", game)
    container = Element("container", {"id": "i6", "col": "1", "row": "1"})
    SubElement(container, "digit", {"id": "nope"})
    with pytest.raises(LevelLoadError):
        level.xml_container_item(container)