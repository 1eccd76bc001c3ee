"""
Input abstraction layer for dodgekit games.

Provides unified pointer handling that works identically with mouse,
touch, or scripted sources.
"""

from dodgekit.games.input.input_event import InputEvent
from dodgekit.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
