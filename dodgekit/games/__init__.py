"""
Dodgekit Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum
- scheduler: Cooperative per-frame callback scheduler
- input: Pointer input events, sources and manager
"""

from dodgekit.games.game_state import GameState
from dodgekit.games.base_game import BaseGame
from dodgekit.games.scheduler import FrameScheduler, FrameHandle

__all__ = [
    'GameState',
    'BaseGame',
    'FrameScheduler',
    'FrameHandle',
]
