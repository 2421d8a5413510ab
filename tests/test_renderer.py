"""Headless renderer smoke test to validate basic frame generation."""

import pytest

from maze_ball.config import GameConfig, MazeConfig, VizConfig


def test_headless_renderer_smoke():
    try:
        from maze_ball.viz.pygame_renderer import Renderer
    except Exception:
        pytest.skip("pygame not available")
    from maze_ball.game import MazeGame

    cfg = GameConfig(maze=MazeConfig(cells_vertical=3, cells_horizontal=4, width_px=200, height_px=150, seed=0))
    game = MazeGame(cfg)
    rend = Renderer(200, 150, viz_cfg=VizConfig(fps=5, show_fps=True), display=False)
    try:
        frame = rend.render_frame(game.world.bodies, won=False)
        assert frame.get_width() == 200 and frame.get_height() == 150
        game.trigger_win()
        frame = rend.render_frame(game.world.bodies, won=True)
        assert frame.get_size() == (200, 150)
        assert rend.poll_events() == (True, [])
    finally:
        rend.close()
