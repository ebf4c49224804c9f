"""Interactive Pygame viewer for the pan/zoom canvas.

Controls:
  - Mouse: Left-drag to pan (release to coast), wheel to zoom
  - R: Reset view
  - Q / ESC: Quit
"""

from __future__ import annotations

import logging

import pygame

from core.config import (
    DEFAULT_GRID_SIZE,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    MAX_FRAME_TIME,
    TARGET_RENDERING_FPS,
)
from core.viewport import ViewportConfig
from ui.canvas_panel import CanvasPanel
from ui.grid import GridPainter
from utils.input import InputHandler

logger = logging.getLogger(__name__)


def clamp_frame_time(elapsed_ms: int) -> float:
    """Clock milliseconds -> seconds, capped at MAX_FRAME_TIME.

    frame_time * smooth_zoom_speed must stay <= 1 or the zoom overshoots its target.
    """
    return min(elapsed_ms / 1000.0, MAX_FRAME_TIME)


class HudPainter:
    """Paint hook showing the viewport state and controls."""

    def __init__(self, font, color: tuple[int, int, int] = (210, 210, 210)):
        self.font = font
        self.color = color

    def build_lines(self, panel: CanvasPanel) -> list[str]:
        ctl = panel.controller
        center = ctl.get_center()
        top_left, bottom_right = ctl.get_visible_bounds()
        return [
            f"center=({center.x:.1f}, {center.y:.1f}) "
            f"zoom={ctl.get_zoom():.4f} target={ctl.target_zoom:.4f}",
            f"bounds=({top_left.x:.1f}, {top_left.y:.1f})..({bottom_right.x:.1f}, {bottom_right.y:.1f}) "
            f"vel=({ctl.velocity.x:.2f}, {ctl.velocity.y:.2f})",
            "LMB drag: pan  |  Wheel: zoom  |  R: reset  |  Q/ESC: quit",
        ]

    def __call__(self, panel: CanvasPanel, surface: pygame.Surface) -> None:
        y = 10
        for line in self.build_lines(panel):
            txt = self.font.render(line, True, self.color)
            surface.blit(txt, (10, y))
            y += 20


class CanvasViewer:
    def __init__(
        self,
        width: int = DEFAULT_SCREEN_WIDTH,
        height: int = DEFAULT_SCREEN_HEIGHT,
        config: ViewportConfig | None = None,
        grid_size: float = DEFAULT_GRID_SIZE,
        fps: int = TARGET_RENDERING_FPS,
        initial_zoom: float | None = None,
    ):
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"Could not open a {width}x{height} window: {exc}") from exc
        pygame.display.set_caption("Canvas Viewer")
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.input_handler = InputHandler()

        self.panel = CanvasPanel((0, 0, width, height), config=config, background=(20, 20, 25))
        if initial_zoom is not None:
            self.panel.controller.set_zoom(initial_zoom)

        self.font = pygame.font.SysFont("monospace", 14)
        self.panel.hooks.add("paint", "grid", GridPainter(grid_size))
        self.panel.hooks.add("paint", "hud", HudPainter(self.font))

    def handle_events(self) -> bool:
        signals = self.input_handler.get_events()
        if signals["quit"]:
            return False
        if signals["reset"]:
            self.panel.controller.reset()
        for event in signals["pointer_events"]:
            self.panel.handle_event(event)
        return True

    def run(self) -> None:
        logger.info("Canvas viewer running at %d FPS", self.fps)
        running = True
        while running:
            running = self.handle_events()
            frame_dt = clamp_frame_time(self.clock.tick(self.fps))
            self.panel.update(frame_dt, pygame.mouse.get_pos())
            self.panel.draw(self.screen)
            pygame.display.flip()

    def close(self) -> None:
        pygame.quit()
