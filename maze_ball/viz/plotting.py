from __future__ import annotations

from typing import List, Optional, Tuple

import matplotlib.pyplot as plt

from ..maze.generator import Maze
from ..maze.geometry import wall_rects


def draw_maze(
    maze: Maze,
    ax,
    path: Optional[List[Tuple[int, int]]] = None,
    title: Optional[str] = None,
):
    """Plot closed walls of ``maze`` in cell units, with an optional solution path.

    Rows grow downwards, matching the game canvas.
    """
    ax.clear()
    rows, cols = maze.rows, maze.cols
    # Outer border
    ax.plot([0, cols, cols, 0, 0], [0, 0, rows, rows, 0], "k-", linewidth=2)
    for rect in wall_rects(maze, cols, rows, thickness=0.0):
        left, top, right, bottom = rect.bounds
        ax.plot([left, right], [top, bottom], "k-", linewidth=1.5)

    if path:
        xs = [c + 0.5 for _, c in path]
        ys = [r + 0.5 for r, _ in path]
        ax.plot(xs, ys, "c-", linewidth=2, alpha=0.9, label="path")
        ax.plot(xs[0], ys[0], "bo", label="start")
        ax.plot(xs[-1], ys[-1], "gs", label="goal")

    sr, sc = maze.start
    ax.plot(sc + 0.5, sr + 0.5, "rx", markersize=6, label="carve start")

    ax.set_aspect("equal")
    ax.set_xlim(-0.1, cols + 0.1)
    ax.set_ylim(rows + 0.1, -0.1)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title or f"Maze {rows}x{cols}")
    return ax


def save_maze_png(maze: Maze, out_path: str, path=None, size_in: float = 6.0) -> None:
    fig, ax = plt.subplots(figsize=(size_in, size_in))
    draw_maze(maze, ax, path=path)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
