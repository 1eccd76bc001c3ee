"""
Abstract base class for input sources.

Games read pointer positions through this interface, so a mouse, a
touch screen or a scripted test source can drive the same game logic.
"""

from abc import ABC, abstractmethod
from typing import List

from dodgekit.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    Subclasses must implement:
        - poll_events(): Return new input events since last poll
        - update(dt): Update source state for time-based processing
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll.

        Returns all events collected since the previous call, then clears
        the internal queue.

        Returns:
            List of InputEvent objects, empty list if no events
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update source state. Called once per frame.

        Args:
            dt: Delta time in seconds since last update
        """
        pass
