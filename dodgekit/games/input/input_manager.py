"""
Input manager for dodgekit games.

This module provides the InputManager class that owns the active input
source and gives the game loop a single place to read input events from.
"""

from typing import List

from dodgekit.games.input.input_event import InputEvent
from dodgekit.games.input.sources.base import InputSource


class InputManager:
    """Wraps one input source and provides unified event access.

    Examples:
        >>> from dodgekit.games.input.sources.pointer import PointerInputSource
        >>> manager = InputManager(PointerInputSource())
        >>> manager.update(0.016)
        >>> events = manager.get_events()
    """

    def __init__(self, source: InputSource):
        """Initialize the input manager.

        Raises:
            TypeError: If source is not an instance of InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an instance of InputSource, got {type(source).__name__}"
            )
        self._source = source

    def update(self, dt: float) -> None:
        """Let the source collect this frame's input."""
        self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """New input events since the last call, oldest first."""
        return self._source.poll_events()

    def clear_events(self) -> None:
        """Discard pending events.

        Used on state transitions so a new run does not steer with stale input.
        """
        self._source.poll_events()
