from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

from omegaconf import OmegaConf

from .constants import (
    BALL_RADIUS_RATIO,
    BARRIER_THICKNESS_PX,
    CANVAS_HEIGHT_PX,
    CANVAS_WIDTH_PX,
    CELLS_HORIZONTAL,
    CELLS_VERTICAL,
    DT,
    EXPLODE_DENSITY,
    EXPLODE_MASS,
    GOAL_SIZE_RATIO,
    MAX_VELOCITY,
    VELOCITY_STEP,
    WALL_THICKNESS_PX,
    WIN_GRAVITY_Y,
)

Color = Tuple[int, int, int]


@dataclass
class MazeConfig:
    cells_horizontal: int = CELLS_HORIZONTAL
    cells_vertical: int = CELLS_VERTICAL
    width_px: int = CANVAS_WIDTH_PX
    height_px: int = CANVAS_HEIGHT_PX
    wall_thickness_px: float = WALL_THICKNESS_PX
    barrier_thickness_px: float = BARRIER_THICKNESS_PX
    goal_size_ratio: float = GOAL_SIZE_RATIO
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        # Cell counts are validated by the generator (InvalidDimensions)
        assert self.width_px > 0 and self.height_px > 0, "canvas size must be > 0"
        assert self.wall_thickness_px > 0.0, "wall_thickness_px must be > 0"
        assert self.barrier_thickness_px > 0.0, "barrier_thickness_px must be > 0"
        assert 0.0 < self.goal_size_ratio <= 1.0, "goal_size_ratio in (0,1]"


@dataclass
class BallConfig:
    radius_ratio: float = BALL_RADIUS_RATIO
    velocity_step: float = VELOCITY_STEP
    max_velocity: float = MAX_VELOCITY

    def __post_init__(self) -> None:
        assert 0.0 < self.radius_ratio < 0.5, "radius_ratio in (0,0.5)"
        assert self.velocity_step > 0.0, "velocity_step must be > 0"
        assert self.max_velocity > 0.0, "max_velocity must be > 0"


@dataclass
class ExplodeConfig:
    gravity_y: float = WIN_GRAVITY_Y
    density: float = EXPLODE_DENSITY
    mass: float = EXPLODE_MASS

    def __post_init__(self) -> None:
        assert self.gravity_y >= 0.0, "gravity_y must be >= 0"
        assert self.density > 0.0, "density must be > 0"
        assert self.mass > 0.0, "mass must be > 0"


@dataclass
class Colors:
    background: Color = (20, 20, 20)
    barrier: Color = (90, 90, 90)
    wall: Color = (145, 34, 33)
    goal: Color = (18, 199, 18)
    ball: Color = (228, 235, 244)
    text: Color = (255, 255, 255)


@dataclass
class VizConfig:
    fps: int = 60
    show_fps: bool = False
    win_text: str = "You win!"
    colors: Colors = field(default_factory=Colors)

    def __post_init__(self) -> None:
        assert self.fps > 0, "fps must be > 0"


@dataclass
class GameConfig:
    maze: MazeConfig = field(default_factory=MazeConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    explode: ExplodeConfig = field(default_factory=ExplodeConfig)
    viz: VizConfig = field(default_factory=VizConfig)
    dt: float = DT

    def __post_init__(self) -> None:
        assert self.dt > 0.0, "dt must be > 0"


def load_config_any(path: str) -> Any:
    """Load a YAML/OMEGACONF file and return the resolved Python object."""
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def load_config_dict(path: str) -> Dict[str, Any]:
    """Load a config file and guarantee a `dict` result."""
    cfg = load_config_any(path)
    if not isinstance(cfg, dict):
        raise TypeError(f"Expected mapping at {path}, got {type(cfg)}")
    return cfg


def _build(cls, data: Optional[Dict[str, Any]]):
    data = dict(data or {})
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise TypeError(f"Unknown {cls.__name__} keys: {unknown}")
    if isinstance(data.get("colors"), dict):
        data["colors"] = _build(Colors, {k: tuple(v) for k, v in data["colors"].items()})
    return cls(**data)


def game_config_from_dict(data: Optional[Dict[str, Any]] = None) -> GameConfig:
    """Map a nested dict (e.g. from YAML) onto GameConfig, keeping defaults for missing keys."""
    data = dict(data or {})
    sections = {"maze": MazeConfig, "ball": BallConfig, "explode": ExplodeConfig, "viz": VizConfig}
    unknown = sorted(set(data) - set(sections) - {"dt"})
    if unknown:
        raise TypeError(f"Unknown GameConfig keys: {unknown}")
    kwargs: Dict[str, Any] = {name: _build(cls, data.get(name)) for name, cls in sections.items()}
    if "dt" in data:
        kwargs["dt"] = float(data["dt"])
    return GameConfig(**kwargs)


def load_game_config(path: Optional[str] = None, overrides: Optional[list] = None) -> GameConfig:
    """Load GameConfig from YAML with optional dotlist overrides (``maze.seed=3``)."""
    base = OmegaConf.create(load_config_dict(path) if path else {})
    if overrides:
        base = OmegaConf.merge(base, OmegaConf.from_dotlist(list(overrides)))
    data = OmegaConf.to_container(base, resolve=True)
    return game_config_from_dict(data)
