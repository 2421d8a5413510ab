"""Turn a carved maze into axis-aligned rectangles for the world.

Coordinates are canvas pixels with the origin at the top-left and y pointing
down. Rectangles are described by their centre and full size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..constants import (
    BALL_RADIUS_RATIO,
    BARRIER_THICKNESS_PX,
    GOAL_SIZE_RATIO,
    LABEL_BARRIER,
    LABEL_GOAL,
    LABEL_WALL,
    WALL_THICKNESS_PX,
)
from .generator import Maze


@dataclass(frozen=True)
class WallRect:
    cx: float
    cy: float
    w: float
    h: float
    label: str = LABEL_WALL

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return (
            self.cx - self.w / 2.0,
            self.cy - self.h / 2.0,
            self.cx + self.w / 2.0,
            self.cy + self.h / 2.0,
        )


def unit_lengths(maze: Maze, width: float, height: float) -> Tuple[float, float]:
    """Cell size (unit_x, unit_y) in pixels."""
    return float(width) / maze.cols, float(height) / maze.rows


def wall_rects(
    maze: Maze,
    width: float,
    height: float,
    thickness: float = WALL_THICKNESS_PX,
) -> List[WallRect]:
    """One rectangle per closed interior wall.

    Horizontal walls (between row r and r + 1) come first, then vertical
    walls (between column c and c + 1), each in row-major order.
    """
    unit_x, unit_y = unit_lengths(maze, width, height)
    rects: List[WallRect] = []

    for (r, c), open_ in _iter_matrix(maze.horizontals):
        if open_:
            continue
        rects.append(
            WallRect(c * unit_x + unit_x / 2.0, r * unit_y + unit_y, unit_x, thickness)
        )

    for (r, c), open_ in _iter_matrix(maze.verticals):
        if open_:
            continue
        rects.append(
            WallRect(c * unit_x + unit_x, r * unit_y + unit_y / 2.0, thickness, unit_y)
        )
    return rects


def _iter_matrix(matrix):
    rows, cols = matrix.shape
    for r in range(rows):
        for c in range(cols):
            yield (r, c), bool(matrix[r, c])


def boundary_rects(
    width: float, height: float, thickness: float = BARRIER_THICKNESS_PX
) -> List[WallRect]:
    """Top, bottom, right and left canvas edges."""
    w, h = float(width), float(height)
    return [
        WallRect(w / 2.0, 0.0, w, thickness, LABEL_BARRIER),
        WallRect(w / 2.0, h, w, thickness, LABEL_BARRIER),
        WallRect(w, h / 2.0, thickness, h, LABEL_BARRIER),
        WallRect(0.0, h / 2.0, thickness, h, LABEL_BARRIER),
    ]


def goal_rect(
    maze: Maze, width: float, height: float, ratio: float = GOAL_SIZE_RATIO
) -> WallRect:
    """Goal square centred in the bottom-right cell."""
    unit_x, unit_y = unit_lengths(maze, width, height)
    return WallRect(
        float(width) - unit_x / 2.0,
        float(height) - unit_y / 2.0,
        unit_x * ratio,
        unit_y * ratio,
        LABEL_GOAL,
    )


def ball_spawn(
    maze: Maze, width: float, height: float, ratio: float = BALL_RADIUS_RATIO
) -> Tuple[float, float, float]:
    """(x, y, radius) of the ball in the top-left cell."""
    unit_x, unit_y = unit_lengths(maze, width, height)
    return unit_x / 2.0, unit_y / 2.0, min(unit_x, unit_y) * ratio
