import numpy as np

from maze_ball.maze.generator import Maze, generate_maze
from maze_ball.utils.connectivity import (
    count_components,
    is_spanning_tree,
    open_neighbours,
    passage_edges,
    solve_path,
)


def _maze(verticals, horizontals):
    v = np.array(verticals, dtype=bool)
    h = np.array(horizontals, dtype=bool)
    rows, cols = v.shape[0], h.shape[1]
    return Maze(rows, cols, (0, 0), np.ones((rows, cols), dtype=bool), v, h)


def test_generated_mazes_are_spanning_trees():
    for seed in range(20):
        maze = generate_maze(6, 9, rng=seed)
        assert count_components(maze) == 1
        assert is_spanning_tree(maze)


def test_cycle_is_not_a_tree():
    # 2x2 with every wall open: 4 passages, one cycle
    maze = _maze([[True], [True]], [[True, True]])
    assert count_components(maze) == 1
    assert not is_spanning_tree(maze)


def test_disconnected_is_not_a_tree():
    maze = _maze([[True], [False]], [[False, True]])
    assert count_components(maze) == 2
    assert not is_spanning_tree(maze)


def test_passage_edges_ids():
    maze = _maze([[True], [False]], [[False, True]])
    edges = {tuple(e) for e in passage_edges(maze).tolist()}
    assert edges == {(0, 1), (1, 3)}


def test_open_neighbours():
    maze = _maze([[True], [False]], [[False, True]])
    assert open_neighbours(maze, (0, 1)) == [(1, 1), (0, 0)]
    assert open_neighbours(maze, (1, 0)) == []


def test_solve_path_unique_route():
    maze = generate_maze(5, 5, rng=42)
    path = solve_path(maze, (0, 0), (4, 4))
    assert path[0] == (0, 0) and path[-1] == (4, 4)
    for a, b in zip(path, path[1:]):
        assert maze.is_open(a, b)
    assert len(set(path)) == len(path)


def test_solve_path_unreachable_and_out_of_bounds():
    maze = _maze([[True], [False]], [[False, False]])
    assert solve_path(maze, (0, 0), (1, 1)) is None
    assert solve_path(maze, (0, 0), (5, 5)) is None


def test_single_cell_tree():
    maze = generate_maze(1, 1, rng=0)
    assert is_spanning_tree(maze)
    assert solve_path(maze, (0, 0), (0, 0)) == [(0, 0)]
