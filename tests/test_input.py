"""
Tests for pointer input: InputEvent, PointerInputSource and InputManager.
"""

import pygame
import pytest
from pydantic import ValidationError

from dodgekit.games.input.input_event import InputEvent
from dodgekit.games.input.input_manager import InputManager
from dodgekit.games.input.sources.base import InputSource
from dodgekit.games.input.sources.pointer import PointerInputSource
from models import EventType, Vector2D


@pytest.fixture
def source():
    """Pointer source for an 800x600 window with the surface at (20, 40)."""
    return PointerInputSource(
        surface_origin=lambda: (20.0, 40.0),
        window_size=lambda: (800, 600),
    )


def motion(x, y):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(0, 0, 0))


def finger(kind, finger_id, x, y):
    return pygame.event.Event(kind, finger_id=finger_id, touch_id=0, x=x, y=y, dx=0.0, dy=0.0)


class TestInputEvent:

    def test_defaults_to_move(self):
        event = InputEvent(position=Vector2D(x=1.0, y=2.0), timestamp=0.5)
        assert event.event_type == EventType.MOVE

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValidationError):
            InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=-1.0)

    def test_is_frozen(self):
        event = InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=0.0)
        with pytest.raises(ValidationError):
            event.timestamp = 2.0

    def test_str(self):
        event = InputEvent(position=Vector2D(x=1.0, y=2.0), timestamp=0.25)
        assert "pos=(1.00, 2.00)" in str(event)


class TestPointerInputSource:

    def test_mouse_motion_is_surface_local(self, source):
        assert source.process_event(motion(120, 140)) is True

        events = source.poll_events()
        assert len(events) == 1
        assert events[0].position == Vector2D(x=100.0, y=100.0)
        assert events[0].event_type == EventType.MOVE

    def test_poll_clears_queue(self, source):
        source.process_event(motion(0, 0))
        source.poll_events()
        assert source.poll_events() == []

    def test_outside_surface_is_kept(self, source):
        source.process_event(motion(0, 0))
        event = source.poll_events()[0]
        assert (event.position.x, event.position.y) == (-20.0, -40.0)

    def test_left_click_is_touch(self, source):
        click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(20, 40), button=1)
        assert source.process_event(click) is True
        assert source.poll_events()[0].event_type == EventType.TOUCH

    def test_right_click_not_consumed(self, source):
        click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(20, 40), button=3)
        assert source.process_event(click) is False
        assert source.poll_events() == []

    def test_finger_scaled_by_window(self, source):
        source.process_event(finger(pygame.FINGERDOWN, 7, 0.5, 0.5))

        event = source.poll_events()[0]
        assert event.position == Vector2D(x=380.0, y=260.0)
        assert event.event_type == EventType.TOUCH

    def test_only_first_finger_tracked(self, source):
        source.process_event(finger(pygame.FINGERDOWN, 1, 0.1, 0.1))
        source.process_event(finger(pygame.FINGERMOTION, 2, 0.9, 0.9))
        source.process_event(finger(pygame.FINGERMOTION, 1, 0.2, 0.2))

        events = source.poll_events()
        assert len(events) == 2
        assert events[-1].position == Vector2D(x=140.0, y=80.0)

    def test_finger_up_releases_tracking(self, source):
        source.process_event(finger(pygame.FINGERDOWN, 1, 0.1, 0.1))
        source.process_event(finger(pygame.FINGERUP, 1, 0.1, 0.1))
        source.process_event(finger(pygame.FINGERDOWN, 2, 0.5, 0.5))

        events = source.poll_events()
        assert len(events) == 2
        assert events[-1].position == Vector2D(x=380.0, y=260.0)

    def test_keyboard_not_consumed(self, source):
        key = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=0, unicode=' ', scancode=0)
        assert source.process_event(key) is False


class FakeSource(InputSource):
    def __init__(self):
        self.queue = []
        self.updated = 0

    def poll_events(self):
        events, self.queue = self.queue, []
        return events

    def update(self, dt):
        self.updated += 1


class TestInputManager:

    def test_source_type_checked(self):
        with pytest.raises(TypeError, match="InputSource"):
            InputManager(object())

    def test_update_and_events(self):
        fake = FakeSource()
        manager = InputManager(fake)
        first = InputEvent(position=Vector2D(x=1.0, y=1.0), timestamp=0.0)
        second = InputEvent(position=Vector2D(x=2.0, y=2.0), timestamp=0.1)
        fake.queue = [first, second]

        manager.update(0.016)

        assert fake.updated == 1
        assert manager.get_events() == [first, second]
        assert manager.get_events() == []

    def test_clear_events(self):
        fake = FakeSource()
        manager = InputManager(fake)
        fake.queue = [InputEvent(position=Vector2D(x=5.0, y=5.0), timestamp=0.2)]

        manager.clear_events()

        assert manager.get_events() == []
