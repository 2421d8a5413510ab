"""Randomized depth-first maze carving on a rectangular grid.

A maze is three boolean matrices:
- visited: rows x cols, True once the carve has entered the cell
- verticals: rows x (cols - 1), True where the wall between (r, c) and (r, c + 1) is open
- horizontals: (rows - 1) x cols, True where the wall between (r, c) and (r + 1, c) is open

Open walls form a spanning tree over the grid graph, so there is exactly one
route between any two cells.
"""

from __future__ import annotations

import logging
import numbers
import warnings
from dataclasses import dataclass
from typing import Iterator, List, MutableSequence, Optional, Protocol, Tuple, TypeVar, Union

import numpy as np

from ..constants import LARGE_GRID_CELLS

logger = logging.getLogger(__name__)

T = TypeVar("T")
Cell = Tuple[int, int]
Neighbour = Tuple[int, int, str]

UP = "up"
DOWN = "down"
RIGHT = "right"
LEFT = "left"


class InvalidDimensions(ValueError):
    """Raised when the requested row/column counts are not positive integers."""


class RandomSource(Protocol):
    """Anything exposing numpy's ``Generator.integers(low, high)``."""

    def integers(self, low: int, high: int) -> int: ...


@dataclass(frozen=True)
class Maze:
    rows: int
    cols: int
    start: Cell
    visited: np.ndarray
    verticals: np.ndarray
    horizontals: np.ndarray

    def __iter__(self) -> Iterator[np.ndarray]:
        # Allows ``visited, verticals, horizontals = maze``
        return iter((self.visited, self.verticals, self.horizontals))

    @property
    def passage_count(self) -> int:
        return int(self.verticals.sum()) + int(self.horizontals.sum())

    def is_open(self, a: Cell, b: Cell) -> bool:
        """True if cells ``a`` and ``b`` are adjacent and joined by a passage."""
        (r0, c0), (r1, c1) = sorted((a, b))
        if r0 == r1 and c1 - c0 == 1:
            return bool(self.verticals[r0, c0])
        if c0 == c1 and r1 - r0 == 1:
            return bool(self.horizontals[r0, c0])
        return False


def _check_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensions(f"{name} must be a positive integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensions(f"{name} must be >= 1, got {value!r}")
    return int(value)


def _as_random_source(rng: Union[RandomSource, int, None]) -> RandomSource:
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, numbers.Integral) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    return rng


def shuffle(items: MutableSequence[T], rng: RandomSource) -> MutableSequence[T]:
    """Fisher-Yates shuffle in place: swap the last unprocessed item with a
    uniformly chosen item at or before it, shrinking the range by one."""
    counter = len(items)
    while counter > 0:
        index = int(rng.integers(0, counter))
        counter -= 1
        items[counter], items[index] = items[index], items[counter]
    return items


def grid_neighbours(row: int, col: int, rows: int, cols: int) -> List[Neighbour]:
    """In-bounds neighbours of (row, col) as (row, col, direction), ordered up, down, right, left."""
    candidates = [
        (row - 1, col, UP),
        (row + 1, col, DOWN),
        (row, col + 1, RIGHT),
        (row, col - 1, LEFT),
    ]
    return [(r, c, d) for r, c, d in candidates if 0 <= r < rows and 0 <= c < cols]


def _open_wall(
    verticals: np.ndarray, horizontals: np.ndarray, row: int, col: int, direction: str
) -> None:
    if direction == LEFT:
        verticals[row, col - 1] = True
    elif direction == RIGHT:
        verticals[row, col] = True
    elif direction == UP:
        horizontals[row - 1, col] = True
    elif direction == DOWN:
        horizontals[row, col] = True
    else:
        raise ValueError(f"unknown direction {direction!r}")


def generate_maze(
    rows: int,
    cols: int,
    rng: Union[RandomSource, int, None] = None,
    start: Optional[Cell] = None,
) -> Maze:
    """Carve a perfect maze with a randomized depth-first traversal.

    Args:
        rows: number of cell rows (>= 1).
        cols: number of cell columns (>= 1).
        rng: random source with ``integers(low, high)``, an integer seed, or
            None for fresh OS entropy.
        start: optional fixed start cell; drawn uniformly when omitted.

    Returns:
        A frozen ``Maze`` whose matrices are read-only.

    The traversal keeps an explicit stack of (cell, remaining neighbours)
    frames. Cells are shuffled on entry, so the visit order and the sequence
    of random draws match the recursive formulation exactly.
    """
    rows = _check_dimension("rows", rows)
    cols = _check_dimension("cols", cols)
    source = _as_random_source(rng)

    if rows * cols > LARGE_GRID_CELLS:
        warnings.warn(
            f"generating a {rows}x{cols} maze ({rows * cols} cells); "
            "rendering and simulation will be slow",
            RuntimeWarning,
            stacklevel=2,
        )

    visited = np.zeros((rows, cols), dtype=bool)
    verticals = np.zeros((rows, cols - 1), dtype=bool)
    horizontals = np.zeros((rows - 1, cols), dtype=bool)

    if start is None:
        start_row = int(source.integers(0, rows))
        start_col = int(source.integers(0, cols))
    else:
        start_row, start_col = int(start[0]), int(start[1])
        if not (0 <= start_row < rows and 0 <= start_col < cols):
            raise InvalidDimensions(f"start cell {start} outside {rows}x{cols} grid")

    stack: List[Tuple[int, int, Iterator[Neighbour]]] = []

    def enter(row: int, col: int) -> None:
        if visited[row, col]:
            return
        visited[row, col] = True
        neighbours = shuffle(grid_neighbours(row, col, rows, cols), source)
        stack.append((row, col, iter(neighbours)))

    enter(start_row, start_col)
    while stack:
        row, col, pending = stack[-1]
        step = next(pending, None)
        if step is None:
            stack.pop()
            continue
        next_row, next_col, direction = step
        if visited[next_row, next_col]:
            continue
        _open_wall(verticals, horizontals, row, col, direction)
        enter(next_row, next_col)

    for arr in (visited, verticals, horizontals):
        arr.flags.writeable = False

    maze = Maze(rows, cols, (start_row, start_col), visited, verticals, horizontals)
    logger.debug(
        "carved %dx%d maze from %s with %d passages",
        rows,
        cols,
        maze.start,
        maze.passage_count,
    )
    return maze
