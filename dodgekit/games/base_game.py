"""Base class for all dodgekit games.

All games should inherit from BaseGame so the standalone launcher and
tests can drive them through one interface.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from dodgekit.games.game_state import GameState


class BaseGame(ABC):
    """Abstract base class for all dodgekit games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current displayed score
        - handle_input(events): Process input events
        - update(dt): Advance the game by one frame of the main loop
        - render(screen): Draw the game

    Optional overrides:
        - reset(): Reset game to initial state
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to every game; game-specific entries with the same
    # name take precedence.
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible sessions'
        },
        {
            'name': '--fps',
            'type': int,
            'default': 60,
            'help': 'Frames per second of the main loop'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        merged: Dict[str, Dict[str, Any]] = {}
        for arg in [*cls.ARGUMENTS, *cls._BASE_ARGUMENTS]:
            merged.setdefault(arg['name'], arg)
        return list(merged.values())

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState."""
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score as shown to the player."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance game logic by one main-loop frame.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        pass
