[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionsudoku"
version = "0.1.0"
description = "Game pieces, level loading and board geometry for an action Sudoku game built on pygame."
requires-python = ">=3.10"
keywords = ["sudoku", "game", "puzzle", "pygame", "level"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["actionsudoku"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
