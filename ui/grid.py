"""Caller-side grid and axes drawing for a CanvasPanel."""

from __future__ import annotations

import math

import pygame

from core.viewport import ViewportController


def grid_lines(
    controller: ViewportController, grid_size: float, max_lines: int = 400
) -> tuple[list[float], list[float]]:
    """Screen x positions of vertical lines and y positions of horizontal lines.

    Lines sit on multiples of grid_size in world space. The spacing doubles
    until each axis needs at most max_lines lines, so zooming far out stays cheap.
    """
    visible = controller.get_visible_world_rect()
    step = grid_size
    while visible.width / step > max_lines or visible.height / step > max_lines:
        step *= 2.0

    xs: list[float] = []
    wx = math.floor(visible.min_x / step) * step
    while wx <= visible.max_x:
        xs.append(controller.world_to_screen(wx, 0.0).x)
        wx += step

    ys: list[float] = []
    wy = math.floor(visible.min_y / step) * step
    while wy <= visible.max_y:
        ys.append(controller.world_to_screen(0.0, wy).y)
        wy += step
    return xs, ys


class GridPainter:
    """Paint hook drawing a world-aligned grid and the world axes."""

    def __init__(
        self,
        grid_size: float,
        color: tuple[int, int, int] = (45, 45, 55),
        axis_color: tuple[int, int, int] = (100, 80, 80),
    ):
        self.grid_size = grid_size
        self.color = color
        self.axis_color = axis_color

    def __call__(self, panel, surface: pygame.Surface) -> None:
        controller = panel.controller
        w, h = surface.get_width(), surface.get_height()
        xs, ys = grid_lines(controller, self.grid_size)
        for sx in xs:
            pygame.draw.line(surface, self.color, (sx, 0), (sx, h), 1)
        for sy in ys:
            pygame.draw.line(surface, self.color, (0, sy), (w, sy), 1)

        origin = controller.world_to_screen(0.0, 0.0)
        pygame.draw.line(surface, self.axis_color, (0, origin.y), (w, origin.y), 1)
        pygame.draw.line(surface, self.axis_color, (origin.x, 0), (origin.x, h), 1)
