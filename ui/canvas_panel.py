"""Pygame host panel wrapping a ViewportController."""

from __future__ import annotations

import logging

import pygame

from core.hooks import HookTable
from core.maths import Vector2
from core.viewport import ViewportConfig, ViewportController

logger = logging.getLogger(__name__)


class CanvasPanel:
    """A rectangular area of a pygame window that pans and zooms with the mouse.

    The panel feeds the controller explicit inputs (panel-local pointer, frame
    time, panel size) and leaves all content drawing to "paint" hooks.

    Hooks broadcast through self.hooks:
      - "mouse_pressed"(panel, button, local_pos): return True to consume
      - "mouse_released"(panel, button, local_pos)
      - "mouse_wheeled"(panel, delta): return True to consume
      - "think"(panel, frame_time)
      - "paint"(panel, surface): surface spans exactly the panel rect, origin at its top-left
    """

    def __init__(
        self,
        rect: pygame.Rect | tuple[int, int, int, int],
        config: ViewportConfig | None = None,
        background: tuple[int, int, int] | None = None,
    ):
        self.rect = pygame.Rect(rect)
        self.controller = ViewportController(self.rect.width, self.rect.height, config)
        self.hooks = HookTable()
        # None leaves whatever is already on the target surface
        self.background = background
        # Window-space mouse position from the last update, used for wheel hover
        self._last_mouse = Vector2(self.rect.center)

    def to_local(self, pos: Vector2 | tuple[float, float]) -> Vector2:
        """Window pixel position -> panel-local position."""
        return Vector2(pos[0] - self.rect.x, pos[1] - self.rect.y)

    def resize(self, rect: pygame.Rect | tuple[int, int, int, int]) -> None:
        self.rect = pygame.Rect(rect)
        self.controller.resize(self.rect.width, self.rect.height)
        logger.debug("Canvas panel resized to %s", self.rect)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route a pygame mouse event into hooks and the controller.

        Returns True when the panel used the event.
        """
        if event.type == pygame.MOUSEBUTTONDOWN:
            # Legacy wheel buttons (4/5) arrive alongside MOUSEWHEEL; skip them
            if event.button in (4, 5) or not self.rect.collidepoint(event.pos):
                return False
            local = self.to_local(event.pos)
            if self.hooks.call("mouse_pressed", self, event.button, local):
                return True
            self.controller.on_pointer_press(event.button, local)
            return True

        if event.type == pygame.MOUSEBUTTONUP:
            if event.button in (4, 5):
                return False
            local = self.to_local(event.pos)
            self.hooks.call("mouse_released", self, event.button, local)
            # Releases outside the panel still end a drag
            self.controller.on_pointer_release(event.button)
            return self.rect.collidepoint(event.pos)

        if event.type == pygame.MOUSEWHEEL:
            if not self.rect.collidepoint(self._last_mouse.x, self._last_mouse.y):
                return False
            if self.hooks.call("mouse_wheeled", self, event.y):
                return True
            self.controller.on_wheel(event.y)
            return True

        return False

    def update(self, frame_time: float, mouse_pos: Vector2 | tuple[float, float]) -> None:
        """Advance the viewport one frame.

        Args:
            frame_time: Seconds since the previous frame
            mouse_pos: Mouse position in window pixels
        """
        self._last_mouse = Vector2(mouse_pos[0], mouse_pos[1])
        self.controller.update(frame_time, self.to_local(mouse_pos))
        self.hooks.call("think", self, frame_time)

    def draw(self, surface: pygame.Surface) -> None:
        area = self.rect.clip(surface.get_rect())
        if area.width <= 0 or area.height <= 0:
            return
        if area == self.rect:
            canvas = surface.subsurface(area)
        else:
            # Partly off the target: paint a full panel-sized canvas so hook
            # coordinates keep their origin at rect.topleft, then copy it back
            canvas = pygame.Surface(self.rect.size, 0, surface)
            canvas.blit(surface, (-self.rect.x, -self.rect.y))
        if self.background is not None:
            canvas.fill(self.background)
        self.hooks.call("paint", self, canvas)
        if area != self.rect:
            surface.blit(canvas, self.rect.topleft)
