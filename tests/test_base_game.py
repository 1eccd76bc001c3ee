"""
Tests for the BaseGame contract and GameState enum.
"""

from abc import ABC

import pytest

from dodgekit.games import BaseGame, GameState


class MinimalGame(BaseGame):
    NAME = "Minimal"
    ARGUMENTS = [
        {'name': '--speed', 'type': float, 'default': 1.0, 'help': 'Speed'},
        {'name': '--seed', 'type': int, 'default': 42, 'help': 'Fixed seed'},
    ]

    def __init__(self):
        self._state = GameState.IDLE

    def _get_internal_state(self):
        return self._state

    def get_score(self):
        return 0

    def handle_input(self, events):
        pass

    def update(self, dt):
        pass

    def render(self, screen):
        pass


def test_base_game_is_abstract():
    assert issubclass(BaseGame, ABC)
    with pytest.raises(TypeError):
        BaseGame()


def test_abstract_methods():
    abstract = BaseGame.__abstractmethods__
    for name in ('_get_internal_state', 'get_score', 'handle_input', 'update', 'render'):
        assert name in abstract


def test_state_reads_internal_state():
    game = MinimalGame()
    assert game.state == GameState.IDLE
    game._state = GameState.GAME_OVER
    assert game.state == GameState.GAME_OVER


def test_game_arguments_take_precedence():
    names = [arg['name'] for arg in MinimalGame.get_arguments()]
    assert names == ['--speed', '--seed', '--fps']

    seed = next(a for a in MinimalGame.get_arguments() if a['name'] == '--seed')
    assert seed['default'] == 42


def test_game_state_values():
    assert [s.value for s in GameState] == ['idle', 'playing', 'game_over']
