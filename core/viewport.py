"""Viewport controller: animated pan/zoom transform between world and screen space."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.config import (
    COAST_DECAY,
    DEFAULT_MAX_ZOOM,
    DEFAULT_MIN_ZOOM,
    DEFAULT_SMOOTH_PAN_SPEED,
    DEFAULT_SMOOTH_ZOOM_SPEED,
    DEFAULT_ZOOM,
    DEFAULT_ZOOM_STEP,
    DRAG_VELOCITY_RETAIN,
    PRIMARY_BUTTON,
    SET_ZOOM_MAX,
    SET_ZOOM_MIN,
    ZOOM_SNAP_EPSILON,
)
from core.maths import Rect, Size2, Vector2, as_vector, clamp

logger = logging.getLogger(__name__)


@dataclass
class ViewportState:
    """Transform and input state, mutated only by ViewportController."""
    center: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    zoom: float = DEFAULT_ZOOM
    target_zoom: float = DEFAULT_ZOOM
    dragging: bool = False
    drag_anchor: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    velocity: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))  # Screen px per frame


@dataclass
class ViewportConfig:
    """Caller-tunable behavior of the viewport."""
    enable_zoom: bool = True
    enable_pan: bool = True
    min_zoom: float = DEFAULT_MIN_ZOOM
    max_zoom: float = DEFAULT_MAX_ZOOM
    zoom_step: float = DEFAULT_ZOOM_STEP
    smooth_zoom_speed: float = DEFAULT_SMOOTH_ZOOM_SPEED
    smooth_pan_speed: float = DEFAULT_SMOOTH_PAN_SPEED


class ViewportController:
    """Pan/zoom viewport driven by mouse input and advanced once per frame.

    Zoom here is world distance per screen pixel: world = screen * zoom, so a
    smaller zoom shows less of the world. The host forwards press/release/wheel
    events and calls update() every frame with the elapsed time and the
    panel-local pointer position.

    Panel size is host-provided and taken as-is. Nothing is validated: a zero
    zoom (reachable with min_zoom <= 0) makes world_to_screen divide by zero,
    and min_zoom > max_zoom pins wheel zoom to min_zoom.
    """

    def __init__(self, width: float, height: float, config: ViewportConfig | None = None):
        """Initialize a viewport centered on the world origin.

        Args:
            width: Panel width in pixels
            height: Panel height in pixels
            config: Optional initial configuration (defaults from core.config)
        """
        self._size = Size2(float(width), float(height))
        self._config = config if config is not None else ViewportConfig()
        self._state = ViewportState()

    @property
    def size(self) -> Size2:
        return self._size

    @property
    def config(self) -> ViewportConfig:
        return self._config

    @property
    def target_zoom(self) -> float:
        return self._state.target_zoom

    @property
    def dragging(self) -> bool:
        return self._state.dragging

    @property
    def drag_anchor(self) -> Vector2:
        return Vector2(self._state.drag_anchor)

    @property
    def velocity(self) -> Vector2:
        return Vector2(self._state.velocity)

    def world_to_screen(self, pos: Vector2 | tuple[float, float], world_y: float | None = None) -> Vector2:
        """Convert world coordinates to panel-local screen coordinates."""
        world = as_vector(pos, world_y)
        s = self._state
        return (world - s.center) / s.zoom + self._size.half

    def screen_to_world(self, pos: Vector2 | tuple[float, float], screen_y: float | None = None) -> Vector2:
        """Convert panel-local screen coordinates to world coordinates."""
        screen = as_vector(pos, screen_y)
        s = self._state
        return (screen - self._size.half) * s.zoom + s.center

    def get_visible_bounds(self) -> tuple[Vector2, Vector2]:
        """Return (top_left, bottom_right) of the panel's visible bounds.

        Both corners come from world_to_screen applied to (-w/2, -h/2) and
        (w/2, h/2). This is the long-standing contract: the result equals the
        world-space corners only at zoom 1 with the center on the origin. Use
        get_visible_world_rect() for the world area actually under the panel.
        """
        half = self._size.half
        top_left = self.world_to_screen(-half)
        bottom_right = self.world_to_screen(half)
        return top_left, bottom_right

    def get_visible_world_rect(self) -> Rect:
        """World-space rectangle covered by the panel."""
        top_left = self.screen_to_world(0.0, 0.0)
        bottom_right = self.screen_to_world(self._size.w, self._size.h)
        return Rect.from_corners(top_left, bottom_right)

    def get_center(self) -> Vector2:
        return Vector2(self._state.center)

    def set_center(self, x: float, y: float) -> None:
        self._state.center = Vector2(x, y)

    def get_zoom(self) -> float:
        return self._state.zoom

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom the viewport animates toward.

        Clamped to the fixed range [SET_ZOOM_MIN, SET_ZOOM_MAX], not to the
        configured wheel bounds.
        """
        self._state.target_zoom = clamp(zoom, SET_ZOOM_MIN, SET_ZOOM_MAX)

    def resize(self, width: float, height: float) -> None:
        self._size = Size2(float(width), float(height))

    def reset(self) -> None:
        """Return to the default view, ending any drag. Configuration is kept."""
        self._state = ViewportState()
        logger.debug("Viewport reset")

    def set_zoom_bounds(self, min_zoom: float, max_zoom: float) -> None:
        self._config.min_zoom = min_zoom
        self._config.max_zoom = max_zoom
        logger.debug("Zoom bounds set to [%s, %s]", min_zoom, max_zoom)

    def set_zoom_step(self, zoom_step: float) -> None:
        self._config.zoom_step = zoom_step
        logger.debug("Zoom step set to %s", zoom_step)

    def set_zoom_enabled(self, enable: bool) -> None:
        self._config.enable_zoom = enable
        logger.debug("Wheel zoom %s", "enabled" if enable else "disabled")

    def set_pan_enabled(self, enable: bool) -> None:
        self._config.enable_pan = enable
        logger.debug("Drag pan %s", "enabled" if enable else "disabled")

    def set_smoothing(self, zoom_speed: float, pan_speed: float) -> None:
        self._config.smooth_zoom_speed = zoom_speed
        self._config.smooth_pan_speed = pan_speed

    def on_pointer_press(self, button: int, pointer: Vector2 | tuple[float, float]) -> None:
        """Start a drag on primary press when panning is enabled.

        Args:
            button: Mouse button number (pygame numbering)
            pointer: Panel-local pointer position at the press
        """
        if button == PRIMARY_BUTTON and self._config.enable_pan:
            self._state.dragging = True
            self._state.drag_anchor = as_vector(pointer)
            self._state.velocity = Vector2(0.0, 0.0)
            logger.debug("Drag started at %s", self._state.drag_anchor)

    def on_pointer_release(self, button: int) -> None:
        # Always clears the drag, even if panning was disabled mid-drag
        if button == PRIMARY_BUTTON:
            if self._state.dragging:
                logger.debug("Drag ended, coasting at %s", self._state.velocity)
            self._state.dragging = False

    def on_wheel(self, delta: float) -> None:
        """Step the target zoom; positive delta (wheel up) zooms in."""
        if self._config.enable_zoom:
            cfg = self._config
            zoom_delta = cfg.zoom_step * delta
            self._state.target_zoom = clamp(
                self._state.target_zoom - zoom_delta, cfg.min_zoom, cfg.max_zoom
            )

    def update(self, frame_time: float, pointer: Vector2 | tuple[float, float]) -> None:
        """Advance the animated state by one frame.

        Zoom converges first, then the drag or inertial coast is applied using
        the already-updated zoom.

        Args:
            frame_time: Seconds since the previous frame
            pointer: Current panel-local pointer position
        """
        self._update_zoom(frame_time)
        self._update_pan(frame_time, as_vector(pointer))

    def _update_zoom(self, frame_time: float) -> None:
        s = self._state
        zoom_delta = s.target_zoom - s.zoom
        if abs(zoom_delta) > ZOOM_SNAP_EPSILON:
            s.zoom = s.zoom + zoom_delta * frame_time * self._config.smooth_zoom_speed
        else:
            s.zoom = s.target_zoom

    def _update_pan(self, frame_time: float, pointer: Vector2) -> None:
        s = self._state
        if s.dragging:
            drag_delta = pointer - s.drag_anchor
            # Content follows the pointer, so the center moves the other way
            s.center = s.center - drag_delta * s.zoom
            s.drag_anchor = pointer
            s.velocity = (
                s.velocity * DRAG_VELOCITY_RETAIN
                + drag_delta * frame_time * self._config.smooth_pan_speed
            )
        else:
            s.center = s.center - s.velocity * s.zoom
            s.velocity = s.velocity * COAST_DECAY
