"""
Maze carving and the wall geometry derived from it.

Carving is deterministic given the random source.
"""

from .generator import InvalidDimensions, Maze, generate_maze, shuffle
from .geometry import WallRect, ball_spawn, boundary_rects, goal_rect, wall_rects

__all__ = [
    "InvalidDimensions",
    "Maze",
    "generate_maze",
    "shuffle",
    "WallRect",
    "ball_spawn",
    "boundary_rects",
    "goal_rect",
    "wall_rects",
]
