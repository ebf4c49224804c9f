from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from canvas_viewer import HudPainter
from core.maths import Size2
from core.viewport import ViewportConfig, ViewportController
from ui.canvas_panel import CanvasPanel
from ui.grid import GridPainter, grid_lines
from utils.input import InputHandler

DT = 1.0 / 60.0


def _press(pos, button: int = 1) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def _release(pos, button: int = 1) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONUP, button=button, pos=pos)


def _wheel(y: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=y)


class _FakeFont:
    def __init__(self):
        self.rendered: list[str] = []

    def render(self, text, _antialias, _color):
        self.rendered.append(text)
        return pygame.Surface((4, 4))


def test_panel_sizes_controller_from_rect() -> None:
    panel = CanvasPanel((10, 20, 200, 100))
    assert panel.controller.size == Size2(200.0, 100.0)
    assert panel.to_local((15, 25)) == (5, 5)

    panel.resize((0, 0, 300, 150))
    assert panel.controller.size == Size2(300.0, 150.0)


def test_press_inside_panel_drags_in_local_space() -> None:
    panel = CanvasPanel((10, 10, 200, 100))
    assert panel.handle_event(_press((110, 60)))
    assert panel.controller.dragging
    assert panel.controller.drag_anchor == (100, 50)

    panel.update(DT, (120, 60))
    assert panel.controller.get_center().x == pytest.approx(-10.0)
    assert panel.controller.drag_anchor == (110, 50)


def test_press_outside_panel_is_ignored() -> None:
    panel = CanvasPanel((10, 10, 200, 100))
    assert not panel.handle_event(_press((500, 500)))
    assert not panel.controller.dragging


def test_legacy_wheel_buttons_are_ignored() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    assert not panel.handle_event(_press((50, 50), button=4))
    assert not panel.handle_event(_release((50, 50), button=5))


def test_release_outside_panel_ends_drag() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    panel.handle_event(_press((50, 50)))
    assert not panel.handle_event(_release((900, 900)))
    assert not panel.controller.dragging


def test_mouse_pressed_hook_can_consume() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    seen = []

    def _consume(p, button, local):
        seen.append((p, button, local))
        return True

    panel.hooks.add("mouse_pressed", "select", _consume)
    assert panel.handle_event(_press((30, 40)))
    assert not panel.controller.dragging
    assert seen == [(panel, 1, (30, 40))]


def test_mouse_released_hook_sees_release() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    seen = []
    panel.hooks.add("mouse_released", "log", lambda p, button, local: seen.append(button))
    panel.handle_event(_release((10, 10), button=3))
    assert seen == [3]


def test_wheel_zooms_when_hovered() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    panel.update(DT, (50, 50))
    assert panel.handle_event(_wheel(1))
    assert panel.controller.target_zoom == pytest.approx(0.9)


def test_wheel_ignored_when_pointer_outside() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    panel.update(DT, (500, 500))
    assert not panel.handle_event(_wheel(1))
    assert panel.controller.target_zoom == 1


def test_wheel_hook_can_consume() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    panel.hooks.add("mouse_wheeled", "block", lambda p, delta: True)
    assert panel.handle_event(_wheel(1))
    assert panel.controller.target_zoom == 1


def test_update_broadcasts_think() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    seen = []
    panel.hooks.add("think", "t", lambda p, frame_time: seen.append(frame_time))
    panel.update(0.25, (0, 0))
    assert seen == [0.25]


def test_draw_paints_subsurface() -> None:
    panel = CanvasPanel((10, 10, 200, 100), background=(1, 2, 3))
    sizes = []
    panel.hooks.add("paint", "size", lambda p, surface: sizes.append(surface.get_size()))

    target = pygame.Surface((300, 200))
    panel.draw(target)
    assert sizes == [(200, 100)]
    assert target.get_at((50, 50))[:3] == (1, 2, 3)
    assert target.get_at((5, 5))[:3] == (0, 0, 0)


def test_draw_skips_offscreen_panel() -> None:
    panel = CanvasPanel((500, 500, 50, 50))
    calls = []
    panel.hooks.add("paint", "count", lambda p, surface: calls.append(1))
    panel.draw(pygame.Surface((100, 100)))
    assert calls == []


def _mark_world_origin(panel, surface) -> None:
    origin = panel.controller.world_to_screen(0.0, 0.0)
    surface.set_at((int(origin.x), int(origin.y)), (255, 0, 0))


@pytest.mark.parametrize(
    "rect, expected",
    [
        ((-50, 0, 200, 100), (50, 50)),
        ((0, -30, 200, 100), (100, 20)),
        ((-50, -30, 200, 100), (50, 20)),
    ],
)
def test_draw_keeps_panel_origin_when_clipped(rect, expected) -> None:
    panel = CanvasPanel(rect)
    panel.hooks.add("paint", "origin", _mark_world_origin)
    sizes = []
    panel.hooks.add("paint", "size", lambda p, surface: sizes.append(surface.get_size()))

    target = pygame.Surface((300, 200))
    target.fill((0, 0, 40))
    panel.draw(target)

    assert sizes == [(200, 100)]
    red = [
        (x, y)
        for x in range(target.get_width())
        for y in range(target.get_height())
        if target.get_at((x, y))[:3] == (255, 0, 0)
    ]
    assert red == [expected]
    # Without a background the existing target pixels are kept
    assert target.get_at((10, 60))[:3] == (0, 0, 40)


def test_draw_clipped_panel_fills_only_visible_part() -> None:
    panel = CanvasPanel((-50, 0, 200, 100), background=(1, 2, 3))
    target = pygame.Surface((300, 200))
    panel.draw(target)
    assert target.get_at((0, 0))[:3] == (1, 2, 3)
    assert target.get_at((149, 99))[:3] == (1, 2, 3)
    assert target.get_at((150, 50))[:3] == (0, 0, 0)


def test_panel_passes_config() -> None:
    panel = CanvasPanel((0, 0, 200, 100), config=ViewportConfig(enable_pan=False))
    panel.handle_event(_press((50, 50)))
    assert not panel.controller.dragging


def test_grid_lines_follow_world_multiples() -> None:
    vp = ViewportController(100, 50)
    xs, ys = grid_lines(vp, 25.0)
    assert xs == pytest.approx([0.0, 25.0, 50.0, 75.0, 100.0])
    assert ys == pytest.approx([0.0, 25.0, 50.0])


def test_grid_lines_coarsen_when_dense() -> None:
    vp = ViewportController(100, 50)
    xs, ys = grid_lines(vp, 1.0, max_lines=10)
    assert len(xs) <= 11
    assert len(ys) <= 11


def test_grid_and_hud_painters_draw() -> None:
    panel = CanvasPanel((0, 0, 200, 100))
    surface = pygame.Surface((200, 100))
    GridPainter(25.0, color=(9, 9, 9), axis_color=(200, 0, 0))(panel, surface)
    # World origin is at the panel center
    assert surface.get_at((100, 10))[:3] == (200, 0, 0)

    font = _FakeFont()
    HudPainter(font)(panel, surface)
    assert font.rendered[0].startswith("center=(0.0, 0.0) zoom=1.0000")
    assert len(font.rendered) == 3


def test_input_handler_signals() -> None:
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r),
        _press((1, 1)),
        _wheel(-1),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE),
    ]
    signals = InputHandler().get_events(events)
    assert signals["reset"]
    assert not signals["quit"]
    assert signals["pointer_events"] == events[1:3]

    quit_signals = InputHandler().get_events([pygame.event.Event(pygame.QUIT)])
    assert quit_signals["quit"]
