"""Passage-graph helpers shared by the game, scripts and tests."""

from .connectivity import count_components, is_spanning_tree, open_neighbours, solve_path

__all__ = [
    "count_components",
    "is_spanning_tree",
    "open_neighbours",
    "solve_path",
]
