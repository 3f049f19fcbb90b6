[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labyrintuine"
version = "0.1.0"
description = "A terminal labyrinth game that loads maze maps, lets you choose one and draws it with curses."
requires-python = ">=3.10"
dependencies = []
keywords = ["labyrinth", "maze", "terminal", "game", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labyrintuine = "labyrintuine.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["labyrintuine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
