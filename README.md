# actionsudoku

The building blocks of an action Sudoku game. Players do not type numbers.
Instead, a character named Sparty walks around the board, eats loose digits
into an x-ray stomach and spits them back out onto a 9×9 grid. This package
provides the pieces of that game, a reader for its XML level files, and the
geometry of the grid. It uses pygame for images and drawing.

## Installing

```
pip install .
```

## What is in the package

- `actionsudoku.item`: `Item`, the base for everything on the board. An
  item has a location (`x`, `y`), a size read from its declaration, the
  flags `in_container` and `in_xray`, a `hit_test`, and a `draw` method
  that blits onto a pygame surface. When an item sits in the x-ray, `draw`
  shrinks it to two thirds of its size.
- `actionsudoku.pieces`:
  - `Digit`: a movable number with a `value`.
  - `Given`: a fixed number with a `value`.
  - `Container`: a box that holds digits until `clear()` empties it.
  - `TeamFeature`: a helper that walks toward a target at 100 pixels per
    second.
- `actionsudoku.sparty`: `Sparty`, the player character. It walks toward a
  target at 400 pixels per second. `mouth_move` and `head_butt` toggle
  half-second eating and headbutt animations. Its `hit_test` checks for
  opaque pixels in the head image.
- `actionsudoku.xray`: `Xray`, the stomach. It holds up to `capacity`
  items. `add_item` returns `False` when the stomach is full.
- `actionsudoku.visitor`: `ItemVisitor` and the visitors built on it:
  `DigitVisitor` (counts digits and reports the last value),
  `GivenVisitor`, `IsContainerVisitor`, `XrayFinder` and
  `TeamFeatureVisitor`.
- `actionsudoku.level_load`: `LevelLoad` reads a level file into a game
  object. `extract_level` names a level from its file name.
- `actionsudoku.grid`: `Grid` handles the board's position, cell centres
  and cell indices, and where each solution digit goes. `parse_solution`
  takes the digits out of a solution string.

## Level files

A level is an XML file. Its root element has `width`, `height`,
`tilewidth` and `tileheight` attributes and contains:

- `declarations`: one child for each kind of item, keyed by `id`. Each child
  gives image names, sizes and, for numbers, a `value`.
- `items`: the placed items, each with an `id`, a `col` and a `row`. The
  kinds are `given`, `digit`, `sparty`, `background`, `drowen`, `xray`,
  `container` (whose `digit` children go inside it) and `witch`. An item
  whose `id` has no declaration is skipped.
- `game`: the grid's top-left cell, given as `col` and `row`, with the
  81-digit solution as its text.

Image names are taken relative to an `images/` directory under the current
working directory.

`LevelLoad` raises `LevelLoadError` in two cases: when the file cannot be
read or parsed, and when a container, or a digit inside a container, refers
to an undeclared `id`. `extract_level("levels/level2.xml")` returns
`"Level 2"`. For an empty or very short name, it returns `"Unknown"`.

## The game object

Items and `LevelLoad` do not define the game object they work with. You
supply it:

- `LevelLoad` calls `clear()` and `add(item)` on it and sets its
  `pixel_width`, `pixel_height` and `sparty` attributes.
- `Xray.add_item` calls `set_game_over(True)` when the stomach is full.
- `Sparty.update` calls `headbutt_container(sparty)` while headbutting and
  `eater(sparty)` while eating.
- `Item.container_hit_test` reads `sparty.height`.

A minimal object is enough to load a level and inspect it:

```python
from actionsudoku.grid import Grid
from actionsudoku.level_load import LevelLoad
from actionsudoku.visitor import DigitVisitor


class Board:
    def __init__(self):
        self.items = []
        self.sparty = None
        self.pixel_width = 0
        self.pixel_height = 0

    def clear(self):
        self.items.clear()

    def add(self, item):
        self.items.append(item)


board = Board()
level = LevelLoad("levels/level1.xml", board)

counter = DigitVisitor()
for item in board.items:
    item.accept(counter)
print(counter.digit_count, level.pixel_width(), level.pixel_height())

grid = Grid(level.col, level.row, level.tile_height, level.solution)
print(grid.fill_positions()[:3])
```

## What the package does not do

This package is a library only. It has:

- no command to start the game,
- no window, event loop or menu,
- no game object that ties the pieces together (eating digits, emptying
  containers, placing digits from the x-ray, checking a filled grid against
  the solution, moving between levels),
- no timer or scoreboard,
- no on-screen messages.

To play, you must write those parts yourself on top of the classes above.

## Running the tests

```
pip install .[test]
pytest
```