"""
Shared pytest fixtures for the simulation tests.

Game fixtures are function-scoped and seeded so every test starts from a
known board. Most rule tests remove the spawned balls and place their own.
"""

from typing import Callable

import pytest

from axion.game import Game


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """Factory for a seeded game with no balls on the board."""

    def _make(width: int = 20, height: int = 20, seed: int = 1234) -> Game:
        game = Game(width, height, seed=seed)
        game.hazards.clear()
        return game

    return _make
