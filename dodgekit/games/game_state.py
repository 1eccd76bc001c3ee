"""Common GameState enum for all dodgekit games.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states.

    States:
        IDLE: Waiting on the start screen, no simulation running
        PLAYING: Active gameplay, frames are being scheduled
        GAME_OVER: Session ended, final score on display

    Usage in game_mode.py:
        from dodgekit.games.game_state import GameState

        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                return self._state
    """
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"
