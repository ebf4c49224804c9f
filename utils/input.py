"""Input collection: translate OS events into simple viewer signals.

Mouse events are not interpreted here; they are handed back for the canvas
panel to route into its viewport.
"""

from __future__ import annotations

import pygame

POINTER_EVENT_TYPES = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEWHEEL)


class InputHandler:
    """Collects input events without applying any viewport logic."""

    def get_events(self, events: list[pygame.event.Event] | None = None) -> dict:
        """Poll pygame events (or use the given ones) and return signals.

        Signals include:
          - quit: bool
          - reset: bool
          - pointer_events: list of mouse button/wheel events, in order
        """
        signals: dict = {"quit": False, "reset": False, "pointer_events": []}
        if events is None:
            events = pygame.event.get()

        for event in events:
            if event.type == pygame.QUIT:
                signals["quit"] = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    signals["quit"] = True
                elif event.key == pygame.K_r:
                    signals["reset"] = True
            elif event.type in POINTER_EVENT_TYPES:
                signals["pointer_events"].append(event)

        return signals
