import numpy as np
import pytest

from maze_ball.maze.generator import (
    InvalidDimensions,
    generate_maze,
    grid_neighbours,
    shuffle,
)


class ZeroSource:
    """Random source that always returns the lowest allowed value."""

    def __init__(self):
        self.calls = []

    def integers(self, low, high):
        self.calls.append((low, high))
        return low


@pytest.mark.parametrize("rows,cols", [(1, 1), (1, 5), (5, 1), (2, 3), (7, 4), (12, 12)])
def test_all_cells_visited_and_tree_edge_count(rows, cols):
    maze = generate_maze(rows, cols, rng=np.random.default_rng(rows * 31 + cols))
    assert maze.visited.shape == (rows, cols)
    assert maze.verticals.shape == (rows, cols - 1)
    assert maze.horizontals.shape == (rows - 1, cols)
    assert maze.visited.all()
    assert maze.passage_count == rows * cols - 1


def test_single_cell_maze_has_no_passages():
    visited, verticals, horizontals = generate_maze(1, 1, rng=0)
    assert visited.tolist() == [[True]]
    assert verticals.size == 0
    assert horizontals.size == 0


def test_single_row_opens_every_wall():
    maze = generate_maze(1, 6, rng=3)
    assert maze.horizontals.shape == (0, 6)
    assert maze.verticals.all()


def test_same_seed_same_maze():
    a = generate_maze(9, 11, rng=1234)
    b = generate_maze(9, 11, rng=1234)
    assert a.start == b.start
    assert np.array_equal(a.verticals, b.verticals)
    assert np.array_equal(a.horizontals, b.horizontals)


def test_different_seeds_differ():
    a = generate_maze(10, 10, rng=1)
    b = generate_maze(10, 10, rng=2)
    same = (
        a.start == b.start
        and np.array_equal(a.verticals, b.verticals)
        and np.array_equal(a.horizontals, b.horizontals)
    )
    assert not same


def test_zero_source_three_by_three_serpentine():
    src = ZeroSource()
    maze = generate_maze(3, 3, rng=src)
    assert maze.start == (0, 0)
    # Row 0 rightward, down the last column, row 2 leftward, up, then into the centre
    assert maze.verticals.tolist() == [
        [True, True],
        [True, False],
        [True, True],
    ]
    assert maze.horizontals.tolist() == [
        [False, False, True],
        [True, False, True],
    ]
    # start row, start col, then one shuffle per cell
    assert src.calls[:2] == [(0, 3), (0, 3)]


def test_fixed_start_cell_is_used():
    maze = generate_maze(4, 4, rng=5, start=(3, 2))
    assert maze.start == (3, 2)
    assert maze.passage_count == 15


def test_matrices_are_read_only():
    maze = generate_maze(3, 3, rng=0)
    with pytest.raises(ValueError):
        maze.verticals[0, 0] = not maze.verticals[0, 0]


@pytest.mark.parametrize(
    "rows,cols",
    [(0, 3), (3, -1), (0, 0), (2.5, 3), (3, "4"), (True, 3), (None, 2)],
)
def test_invalid_dimensions_rejected(rows, cols):
    with pytest.raises(InvalidDimensions):
        generate_maze(rows, cols, rng=0)


def test_invalid_dimensions_is_value_error():
    with pytest.raises(ValueError):
        generate_maze(-2, 2)


def test_numpy_integer_dimensions_accepted():
    maze = generate_maze(np.int64(2), np.int32(3), rng=0)
    assert (maze.rows, maze.cols) == (2, 3)


def test_start_outside_grid_rejected():
    with pytest.raises(InvalidDimensions):
        generate_maze(2, 2, rng=0, start=(2, 0))


def test_shuffle_zero_source_rotates_left():
    items = ["a", "b", "c", "d"]
    assert shuffle(items, ZeroSource()) == ["b", "c", "d", "a"]


def test_shuffle_is_permutation():
    rng = np.random.default_rng(7)
    items = list(range(10))
    out = shuffle(list(items), rng)
    assert sorted(out) == items


def test_grid_neighbours_filters_out_of_bounds():
    assert grid_neighbours(0, 0, 3, 3) == [(1, 0, "down"), (0, 1, "right")]
    assert len(grid_neighbours(1, 1, 3, 3)) == 4
    assert grid_neighbours(0, 0, 1, 1) == []


def test_large_grid_does_not_hit_recursion_limit():
    maze = generate_maze(100, 100, rng=11)
    assert maze.passage_count == 100 * 100 - 1


def test_very_large_grid_warns():
    with pytest.warns(RuntimeWarning):
        maze = generate_maze(101, 100, rng=11)
    assert maze.visited.all()
