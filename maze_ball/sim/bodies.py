"""Bodies living in the maze world."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..maze.geometry import WallRect

Color = Tuple[int, int, int]


@dataclass
class Body:
    """Axis-aligned body: a box or a disc, static or dynamic.

    - x, y: centre (pixels, y down)
    - w, h: full extent; discs use 2 * radius for both
    - vx, vy: velocity (pixels per step), ignored while static
    """

    label: str
    x: float
    y: float
    w: float
    h: float
    shape: str = "rect"  # "rect" or "circle"
    is_static: bool = True
    vx: float = 0.0
    vy: float = 0.0
    density: float = 0.001
    mass: float = 1.0
    color: Color = (200, 200, 200)

    def __post_init__(self) -> None:
        assert self.shape in ("rect", "circle"), "shape must be 'rect' or 'circle'"
        assert self.w >= 0.0 and self.h >= 0.0, "extent must be >= 0"

    @classmethod
    def from_rect(cls, rect: WallRect, color: Color, is_static: bool = True) -> "Body":
        return cls(rect.label, rect.cx, rect.cy, rect.w, rect.h, is_static=is_static, color=color)

    @classmethod
    def circle(cls, label: str, x: float, y: float, radius: float, color: Color) -> "Body":
        d = 2.0 * float(radius)
        return cls(label, x, y, d, d, shape="circle", is_static=False, color=color)

    @property
    def radius(self) -> float:
        return 0.5 * min(self.w, self.h)

    def bounds(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom)."""
        hw, hh = 0.5 * self.w, 0.5 * self.h
        return (self.x - hw, self.y - hh, self.x + hw, self.y + hh)

    def overlaps(self, other: "Body") -> bool:
        l0, t0, r0, b0 = self.bounds()
        l1, t1, r1, b1 = other.bounds()
        return l0 < r1 and l1 < r0 and t0 < b1 and t1 < b0

    def set_static(self, flag: bool) -> None:
        self.is_static = bool(flag)
        if self.is_static:
            self.vx = 0.0
            self.vy = 0.0

    def set_velocity(self, vx: float, vy: float) -> None:
        self.vx = float(vx)
        self.vy = float(vy)
