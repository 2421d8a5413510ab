"""Maze game: assembles the carved maze into a world and runs the rules.

Rules:
- Arrow keys / WASD nudge the ball's velocity, clamped per axis.
- When the ball first touches the goal the player wins and every
  non-barrier body turns dynamic and falls under gravity.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .config import GameConfig
from .constants import LABEL_BALL, LABEL_BARRIER, LABEL_GOAL
from .maze.generator import Maze, generate_maze
from .maze.geometry import ball_spawn, boundary_rects, goal_rect, wall_rects
from .sim.bodies import Body
from .sim.world import CollisionPair, World

logger = logging.getLogger(__name__)

# Browser-style names and pygame.key.name() output both map here
KEY_DIRECTIONS = {
    "w": "up",
    "up": "up",
    "arrowup": "up",
    "s": "down",
    "down": "down",
    "arrowdown": "down",
    "a": "left",
    "left": "left",
    "arrowleft": "left",
    "d": "right",
    "right": "right",
    "arrowright": "right",
}

WIN_LABELS = frozenset((LABEL_BALL, LABEL_GOAL))


class MazeGame:
    def __init__(self, cfg: Optional[GameConfig] = None, maze: Optional[Maze] = None) -> None:
        self.cfg = cfg or GameConfig()
        m = self.cfg.maze
        if maze is None:
            maze = generate_maze(m.cells_vertical, m.cells_horizontal, rng=m.seed)
        self.maze = maze
        self.width = float(m.width_px)
        self.height = float(m.height_px)
        self.won = False
        self.steps = 0

        self.world = World(self.width, self.height, gravity_y=0.0)
        self._build_world()
        self.world.on("collision_start", self._on_collision_start)

    def _build_world(self) -> None:
        m = self.cfg.maze
        colors = self.cfg.viz.colors
        self.world.add(
            Body.from_rect(r, colors.barrier)
            for r in boundary_rects(self.width, self.height, m.barrier_thickness_px)
        )
        self.walls: List[Body] = [
            Body.from_rect(r, colors.wall)
            for r in wall_rects(self.maze, self.width, self.height, m.wall_thickness_px)
        ]
        self.world.add(self.walls)
        self.goal = Body.from_rect(
            goal_rect(self.maze, self.width, self.height, m.goal_size_ratio), colors.goal
        )
        self.world.add(self.goal)
        x, y, radius = ball_spawn(
            self.maze, self.width, self.height, self.cfg.ball.radius_ratio
        )
        self.ball = Body.circle(LABEL_BALL, x, y, radius, colors.ball)
        self.world.add(self.ball)

    def apply_key(self, key: str) -> bool:
        """Nudge the ball for a key name. Returns False for unmapped keys."""
        direction = KEY_DIRECTIONS.get(str(key).lower())
        if direction is None:
            return False
        step = self.cfg.ball.velocity_step
        vmax = self.cfg.ball.max_velocity
        vx, vy = self.ball.vx, self.ball.vy
        if direction == "up":
            vy = max(vy - step, -vmax)
        elif direction == "down":
            vy = min(vy + step, vmax)
        elif direction == "left":
            vx = max(vx - step, -vmax)
        else:
            vx = min(vx + step, vmax)
        self.ball.set_velocity(vx, vy)
        return True

    def _on_collision_start(self, pairs: List[CollisionPair]) -> None:
        for pair in pairs:
            if set(pair.labels) == WIN_LABELS:
                self.trigger_win()
                return

    def trigger_win(self) -> None:
        """Reveal the win state and drop every non-barrier body."""
        if self.won:
            return
        self.won = True
        ex = self.cfg.explode
        self.world.gravity_y = ex.gravity_y
        for body in self.world.bodies:
            if body.label == LABEL_BARRIER:
                continue
            body.set_static(False)
            body.density = ex.density
            body.mass = ex.mass
        logger.info("ball reached goal after %d steps", self.steps)

    def step(self, keys: Iterable[str] = ()) -> List[CollisionPair]:
        for key in keys:
            self.apply_key(key)
        self.steps += 1
        return self.world.step(self.cfg.dt)

    def run_headless(
        self, steps: int, actions: Optional[Sequence[Sequence[str]]] = None
    ) -> bool:
        """Step without a display; ``actions[k]`` are the keys pressed at step k."""
        for k in range(int(steps)):
            keys = actions[k] if actions is not None and k < len(actions) else ()
            self.step(keys)
        return self.won
