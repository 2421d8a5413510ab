from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Tuple

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from ..maze.generator import Maze

Cell = Tuple[int, int]


def cell_index(cell: Cell, cols: int) -> int:
    """Flatten (row, col) to a node id, row-major."""
    return int(cell[0]) * cols + int(cell[1])


def passage_edges(maze: Maze) -> np.ndarray:
    """Open walls as an (E, 2) array of flattened cell ids."""
    cols = maze.cols
    vr, vc = np.nonzero(maze.verticals)
    hr, hc = np.nonzero(maze.horizontals)
    a = np.concatenate([vr * cols + vc, hr * cols + hc])
    b = np.concatenate([vr * cols + vc + 1, (hr + 1) * cols + hc])
    return np.stack([a, b], axis=1).astype(np.int64)


def open_neighbours(maze: Maze, cell: Cell) -> List[Cell]:
    """Cells reachable from ``cell`` through a single passage."""
    r, c = cell
    out: List[Cell] = []
    for dr, dc in ((-1, 0), (1, 0), (0, 1), (0, -1)):
        nr, nc = r + dr, c + dc
        if 0 <= nr < maze.rows and 0 <= nc < maze.cols and maze.is_open((r, c), (nr, nc)):
            out.append((nr, nc))
    return out


def count_components(maze: Maze) -> int:
    """Number of connected regions in the passage graph."""
    n = maze.rows * maze.cols
    edges = passage_edges(maze)
    data = np.ones(edges.shape[0], dtype=np.int8)
    graph = coo_matrix((data, (edges[:, 0], edges[:, 1])), shape=(n, n))
    n_comp, _ = connected_components(graph, directed=False)
    return int(n_comp)


def is_spanning_tree(maze: Maze) -> bool:
    """True if passages connect every cell with no cycles.

    A graph on N nodes is a tree iff it is connected and has N - 1 edges.
    """
    n = maze.rows * maze.cols
    return maze.passage_count == n - 1 and count_components(maze) == 1


def solve_path(maze: Maze, start: Cell, goal: Cell) -> Optional[List[Cell]]:
    """Breadth-first route from ``start`` to ``goal`` through open passages.

    Returns the list of cells including both endpoints, or None when the
    cells are not connected or lie outside the grid.
    """
    for r, c in (start, goal):
        if r < 0 or c < 0 or r >= maze.rows or c >= maze.cols:
            return None
    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))

    q: deque[Cell] = deque()
    q.append(start)
    parent: Dict[Cell, Optional[Cell]] = {start: None}
    while q:
        cur = q.popleft()
        if cur == goal:
            break
        for nxt in open_neighbours(maze, cur):
            if nxt not in parent:
                parent[nxt] = cur
                q.append(nxt)

    if goal not in parent:
        return None
    path: List[Cell] = []
    node: Optional[Cell] = goal
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path
