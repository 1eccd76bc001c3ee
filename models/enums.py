"""
Shared enumerations.
"""

from enum import Enum


class EventType(str, Enum):
    """Types of input events.

    Attributes:
        MOVE: Pointer moved (mouse motion)
        TOUCH: Finger placed or dragged on a touch surface, or a click
    """
    MOVE = "move"
    TOUCH = "touch"
