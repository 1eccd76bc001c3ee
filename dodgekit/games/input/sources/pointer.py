"""
Pointer Input Source - Mouse and single-touch steering input.

This is a shared module used by all games.
"""
import time
from typing import Callable, List, Optional, Tuple

import pygame

from models import Vector2D, EventType
from dodgekit.games.input.input_event import InputEvent
from dodgekit.games.input.sources.base import InputSource


class PointerInputSource(InputSource):
    """Mouse motion and touch input source.

    Converts pygame mouse motion, left clicks and finger events into
    InputEvents in surface-local coordinates. Only the first finger is
    tracked. Events this source does not use are re-posted to the pygame
    event queue for the main loop.

    Args:
        surface_origin: Returns the window position of the game surface's
            top-left corner (default: (0, 0))
        window_size: Returns the window size, used to scale normalized
            finger coordinates (default: pygame.display.get_window_size)
    """

    def __init__(
        self,
        surface_origin: Optional[Callable[[], Tuple[float, float]]] = None,
        window_size: Optional[Callable[[], Tuple[int, int]]] = None,
    ):
        self._event_queue: List[InputEvent] = []
        self._surface_origin = surface_origin or (lambda: (0.0, 0.0))
        self._window_size = window_size or pygame.display.get_window_size
        self._finger_id: Optional[int] = None

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect pointer positions."""
        for event in pygame.event.get():
            if not self.process_event(event):
                pygame.event.post(event)

    def process_event(self, event: pygame.event.Event) -> bool:
        """Convert one pygame event. Returns True if it was consumed."""
        if event.type == pygame.MOUSEMOTION:
            self._push(event.pos[0], event.pos[1], EventType.MOVE)
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._push(event.pos[0], event.pos[1], EventType.TOUCH)
            return True

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            if self._finger_id is None:
                self._finger_id = event.finger_id
            if event.finger_id != self._finger_id:
                return True
            width, height = self._window_size()
            self._push(event.x * width, event.y * height, EventType.TOUCH)
            return True

        if event.type == pygame.FINGERUP:
            if event.finger_id == self._finger_id:
                self._finger_id = None
            return True

        return False

    def _push(self, window_x: float, window_y: float, event_type: EventType) -> None:
        origin_x, origin_y = self._surface_origin()
        position = Vector2D(x=float(window_x - origin_x), y=float(window_y - origin_y))
        self._event_queue.append(InputEvent(
            position=position,
            timestamp=time.monotonic(),
            event_type=event_type,
        ))
