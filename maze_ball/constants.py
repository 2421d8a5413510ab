from __future__ import annotations

# Maze layout
CELLS_HORIZONTAL: int = 3
CELLS_VERTICAL: int = 3
CANVAS_WIDTH_PX: int = 800
CANVAS_HEIGHT_PX: int = 600

# Geometry
WALL_THICKNESS_PX: float = 5.0
BARRIER_THICKNESS_PX: float = 2.0
GOAL_SIZE_RATIO: float = 0.7
BALL_RADIUS_RATIO: float = 0.25

# Ball control
VELOCITY_STEP: float = 5.0
MAX_VELOCITY: float = 8.0

# World
DT: float = 1.0
WIN_GRAVITY_Y: float = 1.0
EXPLODE_DENSITY: float = 0.005
EXPLODE_MASS: float = 1.0

# Body labels
LABEL_BARRIER: str = "barrier"
LABEL_WALL: str = "wall"
LABEL_GOAL: str = "goal"
LABEL_BALL: str = "ball"

# Large grids are fine for the iterative carve but slow to simulate
LARGE_GRID_CELLS: int = 10_000
