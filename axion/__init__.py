"""
Axion - a grid-based territory-capture arcade game.

Cut lines through open territory while balls bounce around the board.
Closing a cut captures every enclosed region that no ball occupies;
capture 75% of the board to clear the level.
"""

from axion.config import GameConfig
from axion.entities import Ball, Direction, Hazard, Player, Position
from axion.game import Game, GamePhase
from axion.grid import Cell, Grid
from axion.regions import Classification, RegionClassifier
from axion.spawn import SpawnPolicy

__all__ = [
    "Ball",
    "Cell",
    "Classification",
    "Direction",
    "Game",
    "GameConfig",
    "GamePhase",
    "Grid",
    "Hazard",
    "Player",
    "Position",
    "RegionClassifier",
    "SpawnPolicy",
]
