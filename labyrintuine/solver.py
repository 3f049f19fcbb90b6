"""Exploration of a labyrinth from its entry point.

Cells are addressed as ``(row, column)`` tuples. Tile ``1`` is the entry,
``2`` a wall, ``3`` a corridor and ``4`` an exit.
"""

from __future__ import annotations

from collections.abc import Container, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple

Cell = Tuple[int, int]

_WALKABLE = frozenset("134")
_PASSABLE = frozenset("34")
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class SolverError(RuntimeError):
    """Raised when the exploration cannot make further progress."""


class CellState(Enum):
    """The exploration state of one maze cell."""

    EXPLORED = auto()
    UNEXPLORED = auto()
    BLOCKED = auto()


@dataclass
class Fork:
    """A cell where the path divides; the root of a tree has no cell."""

    cell: Optional[Cell] = None
    children: list[Fork] = field(default_factory=list)


@dataclass
class Exploration:
    """The paths walked from the entry and the fork tree recorded on each pass."""

    paths: list[list[Cell]]
    forks: list[Fork]


def _neighbours(cell: Cell) -> Iterator[Cell]:
    """Yield the north, south, west and east neighbours that have non-negative coordinates."""
    row, col = cell
    for d_row, d_col in _STEPS:
        n_row, n_col = row + d_row, col + d_col
        if n_row >= 0 and n_col >= 0:
            yield n_row, n_col


def _at(grid, cell: Cell):
    row, col = cell
    try:
        return grid[row][col]
    except IndexError:
        return None


def find_entry(rows: Sequence[str]) -> Cell:
    """Return the first entry tile in row-major order."""
    for row_index, row in enumerate(rows):
        col = row.find("1")
        if col >= 0:
            return row_index, col
    raise ValueError("map has no entry point")


def initial_marks(rows: Sequence[str]) -> list[list[CellState]]:
    """Mark entry, corridor and exit tiles unexplored and walls blocked."""
    return [
        [CellState.UNEXPLORED if tile in _WALKABLE else CellState.BLOCKED for tile in row]
        for row in rows
    ]


def open_neighbours(rows: Sequence[str], cell: Cell, path: Container[Cell]) -> list[Cell]:
    """Return corridor or exit neighbours not on the path, in north, south, west, east order."""
    return [
        neighbour
        for neighbour in _neighbours(cell)
        if _at(rows, neighbour) in _PASSABLE and neighbour not in path
    ]


def count_unexplored(marks: Sequence[Sequence[CellState]], fork: Fork) -> int:
    """Count unexplored cells next to a fork and to every fork below it."""
    if fork.cell is None:
        raise ValueError("the root of a fork tree has no cell")
    own = sum(
        1
        for neighbour in _neighbours(fork.cell)
        if _at(marks, neighbour) is CellState.UNEXPLORED
    )
    return own + sum(count_unexplored(marks, child) for child in fork.children)


def _finished(marks: list[list[CellState]]) -> bool:
    return all(state is not CellState.UNEXPLORED for row in marks for state in row)


def explore(rows: Sequence[str]) -> Exploration:
    """Walk the maze from its entry, repeatedly, until every open cell has been visited.

    Each pass follows corridors from the entry; at a fork it takes the first
    unexplored branch, and a pass ends at a dead end. Raises ``SolverError``
    when a fork offers only explored branches or a pass visits nothing new.
    """
    rows = list(rows)
    entry = find_entry(rows)
    marks = initial_marks(rows)
    paths: list[list[Cell]] = []
    forks: list[Fork] = []

    while True:
        root = Fork()
        forks.append(root)
        parent = root
        path: list[Cell] = []
        visited: set[Cell] = set()
        advanced = False
        cell = entry

        while True:
            path.append(cell)
            visited.add(cell)
            row, col = cell
            if marks[row][col] is CellState.UNEXPLORED:
                advanced = True
            marks[row][col] = CellState.EXPLORED

            options = open_neighbours(rows, cell, visited)
            if len(options) == 1:
                cell = options[0]
                continue
            if len(options) > 1:
                fork = Fork(cell)
                unexplored = [
                    option
                    for option in options
                    if _at(marks, option) is CellState.UNEXPLORED
                ]
                if len(unexplored) == len(options):
                    parent.children.append(fork)
                parent = fork
                if unexplored:
                    cell = unexplored[0]
                    continue
                raise SolverError(f"no unexplored branch left at fork {cell}")
            break

        paths.append(path)
        if _finished(marks):
            return Exploration(paths=paths, forks=forks)
        if not advanced:
            raise SolverError("unexplored cells cannot be reached from the entry")