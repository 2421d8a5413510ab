"""Fixed-step world for the maze game.

Responsibilities:
- Keep the body registry and world gravity.
- Euler-integrate dynamic bodies, resolving overlaps with static bodies one
  axis at a time (x, then y) in small sub-steps so fast bodies cannot skip
  through thin walls.
- Publish "collision_start" when a dynamic/static pair first touches.

Dynamic bodies do not collide with each other.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Set, Tuple, Union

from .bodies import Body

MAX_SUBSTEP_PX: float = 1.0
CONTACT_EPS: float = 1e-6
TERMINAL_VELOCITY: float = 20.0

EVENTS = ("collision_start",)


@dataclass(frozen=True)
class CollisionPair:
    body_a: Body
    body_b: Body

    @property
    def labels(self) -> Tuple[str, str]:
        return self.body_a.label, self.body_b.label


Handler = Callable[[List[CollisionPair]], None]


class World:
    """Minimal world: bodies, gravity and static collision resolution.

    Interface:
    - add(body | iterable)
    - on(event, handler)
    - step(dt) -> list of new CollisionPair
    """

    def __init__(self, width: float, height: float, gravity_y: float = 0.0) -> None:
        assert width > 0 and height > 0, "world size must be > 0"
        self.width = float(width)
        self.height = float(height)
        self.gravity_y = float(gravity_y)
        self.bodies: List[Body] = []
        self._handlers: Dict[str, List[Handler]] = {name: [] for name in EVENTS}
        self._contacts: Set[Tuple[int, int]] = set()

    def add(self, bodies: Union[Body, Iterable[Body]]) -> None:
        if isinstance(bodies, Body):
            self.bodies.append(bodies)
        else:
            self.bodies.extend(bodies)

    def find(self, label: str) -> List[Body]:
        return [b for b in self.bodies if b.label == label]

    def on(self, event: str, handler: Handler) -> None:
        if event not in self._handlers:
            raise ValueError(f"unknown event {event!r}; expected one of {EVENTS}")
        self._handlers[event].append(handler)

    def step(self, dt: float = 1.0) -> List[CollisionPair]:
        """Advance every dynamic body by ``dt`` and fire collision_start."""
        statics = [b for b in self.bodies if b.is_static]
        touching: Dict[Tuple[int, int], CollisionPair] = {}

        for body in self.bodies:
            if body.is_static:
                continue
            body.vy += self.gravity_y * dt
            if self.gravity_y != 0.0:
                body.vy = max(-TERMINAL_VELOCITY, min(TERMINAL_VELOCITY, body.vy))
            for other in self._integrate(body, statics, dt):
                touching[(id(body), id(other))] = CollisionPair(body, other)

        started = [pair for key, pair in touching.items() if key not in self._contacts]
        self._contacts = set(touching)
        if started:
            for handler in self._handlers["collision_start"]:
                handler(started)
        return started

    def _integrate(self, body: Body, statics: List[Body], dt: float) -> List[Body]:
        dx = body.vx * dt
        dy = body.vy * dt
        n = max(1, int(math.ceil(max(abs(dx), abs(dy)) / MAX_SUBSTEP_PX)))
        hits: List[Body] = []
        for _ in range(n):
            prev = body.bounds()
            body.x += dx / n
            hits.extend(self._resolve_axis(body, statics, prev, dx, axis=0))
            if body.vx == 0.0:
                dx = 0.0
            prev = body.bounds()
            body.y += dy / n
            hits.extend(self._resolve_axis(body, statics, prev, dy, axis=1))
            if body.vy == 0.0:
                dy = 0.0
        self._clamp_to_canvas(body)
        return hits

    @staticmethod
    def _resolve_axis(
        body: Body,
        statics: List[Body],
        prev: Tuple[float, float, float, float],
        motion: float,
        axis: int,
    ) -> List[Body]:
        """Push ``body`` back out of statics it entered by moving along ``axis``.

        Overlaps that already existed before the move are reported as
        contacts but left alone.
        """
        hits: List[Body] = []
        p_left, p_top, p_right, p_bottom = prev
        for other in statics:
            if not body.overlaps(other):
                continue
            hits.append(other)
            left, top, right, bottom = other.bounds()
            if axis == 0:
                if motion > 0 and p_right <= left + CONTACT_EPS:
                    body.x = left - 0.5 * body.w
                    body.vx = 0.0
                elif motion < 0 and p_left >= right - CONTACT_EPS:
                    body.x = right + 0.5 * body.w
                    body.vx = 0.0
            else:
                if motion > 0 and p_bottom <= top + CONTACT_EPS:
                    body.y = top - 0.5 * body.h
                    body.vy = 0.0
                elif motion < 0 and p_top >= bottom - CONTACT_EPS:
                    body.y = bottom + 0.5 * body.h
                    body.vy = 0.0
        return hits

    def _clamp_to_canvas(self, body: Body) -> None:
        hw, hh = 0.5 * body.w, 0.5 * body.h
        x = min(max(body.x, hw), self.width - hw)
        y = min(max(body.y, hh), self.height - hh)
        if x != body.x:
            body.x, body.vx = x, 0.0
        if y != body.y:
            body.y, body.vy = y, 0.0
