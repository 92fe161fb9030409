"""Game pieces, level loading and board geometry for an action Sudoku game."""

__version__ = "0.1.0"