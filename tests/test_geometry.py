import pytest

from maze_ball.maze.generator import generate_maze
from maze_ball.maze.geometry import ball_spawn, boundary_rects, goal_rect, wall_rects


class ZeroSource:
    def integers(self, low, high):
        return low


def test_one_rect_per_closed_wall():
    maze = generate_maze(4, 6, rng=9)
    rects = wall_rects(maze, 600, 400)
    closed = int((~maze.verticals).sum() + (~maze.horizontals).sum())
    assert len(rects) == closed
    assert all(r.label == "wall" for r in rects)


def test_wall_positions_for_traced_maze():
    maze = generate_maze(3, 3, rng=ZeroSource())
    rects = wall_rects(maze, 300, 300, thickness=5)
    # Closed horizontals: (0,0), (0,1), (1,1); closed vertical: (1,1)
    horizontal = [r for r in rects if r.w > r.h]
    vertical = [r for r in rects if r.h > r.w]
    assert [(r.cx, r.cy) for r in horizontal] == [(50.0, 100.0), (150.0, 100.0), (150.0, 200.0)]
    assert all((r.w, r.h) == (100.0, 5) for r in horizontal)
    assert len(vertical) == 1
    v = vertical[0]
    assert (v.cx, v.cy, v.w, v.h) == (200.0, 150.0, 5, 100.0)


def test_non_square_units():
    maze = generate_maze(2, 4, rng=1)
    for r in wall_rects(maze, 800, 300):
        if r.w > r.h:
            assert r.w == pytest.approx(200.0)
        else:
            assert r.h == pytest.approx(150.0)


def test_boundaries_goal_and_ball():
    maze = generate_maze(3, 4, rng=0)
    bars = boundary_rects(400, 300)
    assert len(bars) == 4 and all(b.label == "barrier" for b in bars)
    goal = goal_rect(maze, 400, 300)
    assert goal.label == "goal"
    assert (goal.cx, goal.cy) == (350.0, 250.0)
    assert goal.w == pytest.approx(70.0) and goal.h == pytest.approx(70.0)
    x, y, radius = ball_spawn(maze, 400, 300)
    assert (x, y, radius) == (50.0, 50.0, 25.0)


def test_bounds():
    goal = goal_rect(generate_maze(1, 1, rng=0), 100, 100)
    assert goal.bounds == pytest.approx((15.0, 15.0, 85.0, 85.0))
