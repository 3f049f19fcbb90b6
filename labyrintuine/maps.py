"""Labyrinth maps: the built-in maze, file validation and directory loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

EXTENSION = ".labmap"
DEFAULT_FILE_NAME = "Default" + EXTENSION

DEFAULT_MAZE = "\n".join(
    (
        "2222222222222222222222222222222",
        "2133333333222223333332222223332",
        "2232222223332223232232322223232",
        "2233333223232223232232322223232",
        "2232323223232223232232322222232",
        "2232323223333333232233333333232",
        "2232323222222222232222222222232",
        "2232323333333332233333333332232",
        "2232222222222232222222222232232",
        "2232333333322233333322332232232",
        "2232322232322222232322232232232",
        "2232322232333332232322232232232",
        "2232322232222232232322233332232",
        "2232322233332232232322232232232",
        "2232322222222232232322232232232",
        "2232333333333232232322232232232",
        "2232222222222232232322232232232",
        "2233333332222232232322232232232",
        "2222222232222232232322232232232",
        "2333333333333332232222232233334",
        "2222222222222222222222222222222",
    )
)

_TILES = frozenset("1234")
_ENTRY = "1"
_EDGE_ONLY = frozenset("14")


def _lines(text: str) -> list[str]:
    """Split text into lines on newlines, dropping a final empty line and trailing carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(frozen=True)
class Map:
    """A named labyrinth, stored as its rows of tile characters."""

    key: str
    rows: tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0


def map_key(file_name: str) -> str:
    """Return the file name cut at the last occurrence of the map extension."""
    position = file_name.rfind(EXTENSION)
    if position < 0:
        raise ValueError(f"failed to find extension in file name {file_name!r}")
    return file_name[:position]


def make_map(file_name: str, text: str) -> Map:
    """Build a map from a file name and the file's text."""
    return Map(key=map_key(file_name), rows=tuple(_lines(text)))


def default_map() -> Map:
    """Return the maze that is selected when no other map has been chosen."""
    return make_map(DEFAULT_FILE_NAME, DEFAULT_MAZE)


def is_valid_map(text: str) -> bool:
    """Check that text follows the labyrinth format.

    Every line must consist of the tiles 1-4 only, all lines must be the same
    length, there may be at most one entry point, and on rows other than the
    first and last, entries and exits may only sit on the edges.
    """
    lines = _lines(text)
    accepted: list[str] = []
    entries = 0

    for line in lines:
        if not set(line) <= _TILES:
            break
        entries += line.count(_ENTRY)
        if entries > 1:
            break
        if accepted and len(line) != len(accepted[-1]):
            break
        accepted.append(line)

    if len(accepted) != len(lines):
        return False
    if not accepted:
        return True

    first, last = accepted[0], accepted[-1]
    for line in accepted:
        if line in (first, last):
            continue
        inner_marks = (
            index
            for index, tile in enumerate(line)
            if tile in _EDGE_ONLY and index not in (0, len(line) - 1)
        )
        if any(True for _ in inner_marks):
            return False
    return True


def load_maps(directory: str | os.PathLike[str] = ".") -> list[Map]:
    """Load every valid map file found directly inside a directory, ordered by file name."""
    maps: list[Map] = []
    with os.scandir(directory) as entries:
        candidates = sorted(entries, key=lambda entry: entry.name)
    for entry in candidates:
        if entry.is_dir(follow_symlinks=False) or not entry.name.endswith(EXTENSION):
            continue
        contents = Path(entry.path).read_text(encoding="utf-8")
        if is_valid_map(contents.strip()):
            maps.append(make_map(entry.name, contents))
    return maps