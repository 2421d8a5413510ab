from __future__ import annotations

import argparse
import logging

from maze_ball.config import load_game_config
from maze_ball.game import MazeGame
from maze_ball.utils import is_spanning_tree, solve_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Roll the ball from the top-left cell to the goal"
    )
    parser.add_argument("--config", type=str, default=None, help="YAML game config")
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--headless", action="store_true", help="run without a window (smoke test)"
    )
    parser.add_argument("--steps", type=int, default=600, help="headless step budget")
    parser.add_argument("--plot", type=str, default=None, help="save maze + solution PNG")
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument(
        "overrides", nargs="*", help="dotlist overrides, e.g. maze.seed=3 ball.max_velocity=10"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides = list(args.overrides)
    if args.rows is not None:
        overrides.append(f"maze.cells_vertical={args.rows}")
    if args.cols is not None:
        overrides.append(f"maze.cells_horizontal={args.cols}")
    if args.seed is not None:
        overrides.append(f"maze.seed={args.seed}")
    cfg = load_game_config(args.config, overrides)

    game = MazeGame(cfg)
    maze = game.maze
    goal_cell = (maze.rows - 1, maze.cols - 1)
    path = solve_path(maze, (0, 0), goal_cell)
    print(f"[PLAY] maze={maze.rows}x{maze.cols} start={maze.start} passages={maze.passage_count}")
    print(f"[PLAY] spanning_tree={is_spanning_tree(maze)} solution_len={len(path) if path else 0}")

    if args.plot:
        from maze_ball.viz.plotting import save_maze_png

        save_maze_png(maze, args.plot, path=path)
        print(f"[PLAY] saved {args.plot}")

    if args.headless:
        won = game.run_headless(args.steps)
        print(f"[PLAY] headless steps={game.steps} won={won}")
        return 0

    from maze_ball.viz.pygame_renderer import Renderer

    renderer = Renderer(int(game.width), int(game.height), cfg.viz, display=True)
    try:
        running = True
        while running:
            running, keys = renderer.poll_events()
            game.step(keys)
            renderer.render_frame(game.world.bodies, won=game.won)
    finally:
        renderer.close()
    print(f"[PLAY] steps={game.steps} won={game.won}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
