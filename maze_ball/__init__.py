"""Maze ball game: randomized depth-first maze plus a tiny pygame world."""

from .maze.generator import InvalidDimensions, Maze, generate_maze
from .game import MazeGame
from .config import GameConfig

__all__ = [
    "InvalidDimensions",
    "Maze",
    "generate_maze",
    "MazeGame",
    "GameConfig",
]
