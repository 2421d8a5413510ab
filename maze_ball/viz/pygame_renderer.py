"""Pygame renderer for the maze game.

Renders:
- Barrier, wall and goal boxes
- The ball
- "You win" banner once the goal is reached
- Optional FPS readout

Supports windowed (interactive) and headless modes. Returns frames for recording.
"""

from __future__ import annotations

from typing import List, Optional, Tuple
import os

import pygame

from ..config import VizConfig
from ..sim.bodies import Body


class Renderer:
    def __init__(
        self,
        width: int,
        height: int,
        viz_cfg: Optional[VizConfig] = None,
        display: bool = True,
    ) -> None:
        self.viz = viz_cfg or VizConfig()
        self.colors = self.viz.colors
        self.width, self.height = int(width), int(height)
        self.display = bool(display)

        if not self.display:
            os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
        os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        pygame.init()
        if self.display:
            self.screen = pygame.display.set_mode((self.width, self.height))
        else:
            self.screen = pygame.Surface((self.width, self.height))
        pygame.display.set_caption("Maze")
        self.clock = pygame.time.Clock()
        pygame.font.init()
        self.font = pygame.font.SysFont("Arial", 14)
        self.banner_font = pygame.font.SysFont("Arial", 48, bold=True)

    @staticmethod
    def body_rect(body: Body) -> pygame.Rect:
        left, top, right, bottom = body.bounds()
        # At least 1px so thin bars stay visible
        return pygame.Rect(
            int(round(left)),
            int(round(top)),
            max(1, int(round(right - left))),
            max(1, int(round(bottom - top))),
        )

    def draw_body(self, body: Body) -> None:
        if body.shape == "circle":
            center = (int(round(body.x)), int(round(body.y)))
            pygame.draw.circle(self.screen, body.color, center, max(1, int(body.radius)))
        else:
            pygame.draw.rect(self.screen, body.color, self.body_rect(body))

    def draw_banner(self, text: str) -> None:
        surf = self.banner_font.render(text, True, self.colors.text)
        rect = surf.get_rect(center=(self.width // 2, self.height // 2))
        self.screen.blit(surf, rect)

    def draw_hud(self, lines: List[str], y0: int = 10) -> None:
        x, y = 10, y0
        for line in lines:
            surf = self.font.render(line, True, self.colors.text)
            self.screen.blit(surf, (x, y))
            y += 18

    def render_frame(self, bodies: List[Body], won: bool = False) -> "pygame.Surface":
        self.screen.fill(self.colors.background)

        # Ball last so it stays on top of the walls
        for body in sorted(bodies, key=lambda b: b.shape == "circle"):
            self.draw_body(body)

        if won:
            self.draw_banner(self.viz.win_text)
        if self.viz.show_fps:
            self.draw_hud([f"fps: {self.clock.get_fps():.1f}"])

        if self.display:
            pygame.display.flip()
            self.clock.tick(self.viz.fps)
        return self.screen

    def poll_events(self) -> Tuple[bool, List[str]]:
        """Return (keep_running, key names pressed since the last poll)."""
        keys: List[str] = []
        if not self.display:
            return True, keys
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    keys.append(pygame.key.name(event.key))
        return running, keys

    def close(self) -> None:
        if self.display and pygame is not None:
            pygame.display.quit()
        if pygame is not None:
            pygame.quit()
