"""
Simulation controller.

``Game`` owns the board, the player and the hazards and advances them one
discrete tick at a time. A driver (the pygame frontend, a test, a bot)
interacts only through ``set_direction`` and ``update`` and reads the
public state between ticks.

Tick order:
    1. Move the player; a completed trail is classified before the player
       steps off it.
    2. Move every hazard.
    3. Check hazard collisions against the player and the open trail.
    4. Check the win threshold.
"""

import dataclasses
import logging
import random
from enum import IntEnum
from typing import List, Optional

from axion.config import GameConfig
from axion.entities import Direction, Hazard, Player
from axion.grid import Cell, Grid
from axion.regions import Classification, RegionClassifier
from axion.spawn import SpawnPolicy

logger = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Represents the current game phase. WON and LOST are terminal."""
    PLAYING = 0
    WON = 1
    LOST = 2


class Game:
    """
    Territory-capture game state and rules.

    Args:
        width: Board width in cells, overrides ``config.GRID_WIDTH``
        height: Board height in cells, overrides ``config.GRID_HEIGHT``
        config: Rule and spawn settings, defaults to ``GameConfig()``
        rng: Random source used for hazard placement
        seed: Seed for a fresh random source when ``rng`` is not given
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None):
        config = config if config is not None else GameConfig()
        if width is not None or height is not None:
            config = dataclasses.replace(
                config,
                GRID_WIDTH=width if width is not None else config.GRID_WIDTH,
                GRID_HEIGHT=height if height is not None else config.GRID_HEIGHT,
            )

        self.config = config
        self.rng = rng if rng is not None else random.Random(seed)
        self.spawner = SpawnPolicy(config, self.rng)
        self.classifier = RegionClassifier()
        self.last_classification: Optional[Classification] = None

        # Game state (filled in by _initialize_game)
        self.grid: Optional[Grid] = None
        self.player: Optional[Player] = None
        self.hazards: List[Hazard] = []
        self.phase = GamePhase.PLAYING
        self.score = 0
        self.level = 1
        self.filled_percentage = 0.0
        self.target_percentage = config.FILL_THRESHOLD

        self._initialize_game()

    def _initialize_game(self):
        """Build a fresh board, player and hazard set for level 1."""
        self.grid = Grid(self.config.GRID_WIDTH, self.config.GRID_HEIGHT)
        self.player = self._new_player()
        self.phase = GamePhase.PLAYING
        self.score = 0
        self.level = 1
        self.target_percentage = self.config.FILL_THRESHOLD
        self.last_classification = None

        self.hazards = self.spawner.spawn(
            self.grid, self.player, self.config.initial_hazard_count
        )
        self.update_filled_percentage()
        logger.info(
            f"New game {self.width}x{self.height} with {len(self.hazards)} balls"
        )

    def _new_player(self) -> Player:
        """Player on the left border, half-way down, facing right."""
        return Player(0, self.config.GRID_HEIGHT // 2, Direction.RIGHT)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def actors(self) -> list:
        """The player followed by every hazard."""
        return [self.player, *self.hazards]

    def cell_at(self, x: int, y: int) -> Cell:
        return self.grid.cell_at(x, y)

    def is_filled(self, x: int, y: int) -> bool:
        return self.grid.is_territory(x, y)

    def update_filled_percentage(self) -> float:
        self.filled_percentage = self.grid.calculate_fill_percentage()
        return self.filled_percentage

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_direction(self, direction: Direction) -> bool:
        """
        Request a new facing direction.

        Reversing onto the trail while drawing is refused. Requests between
        two ticks are checked against the last step actually taken as well as
        the current facing. On Territory any direction is accepted.

        Returns:
            True if the direction was applied
        """
        player = self.player
        if player.is_drawing:
            if direction == player.direction.opposite:
                return False
            if player.last_move is not None and direction == player.last_move.opposite:
                return False
        player.direction = direction
        return True

    def update(self) -> GamePhase:
        """
        Advance the simulation by one tick.

        Returns:
            The phase after the tick. Terminal games are left untouched.
        """
        if self.phase != GamePhase.PLAYING:
            return self.phase

        self._update_player()
        if self.phase != GamePhase.PLAYING:
            return self.phase

        for hazard in self.hazards:
            hazard.update(self.grid)

        if self._hazard_collision():
            self._set_phase(GamePhase.LOST)
            return self.phase

        if self.filled_percentage >= self.target_percentage:
            self._set_phase(GamePhase.WON)

        return self.phase

    def reset(self):
        """Start over with a fresh game of the same dimensions."""
        self._initialize_game()

    def next_level(self):
        """
        Advance to the next level.

        Clears the interior, puts the player back at the start and spawns
        more balls. Score carries over.
        """
        self.level += 1
        self.grid.clear_interior()
        self.player = self._new_player()
        self.last_classification = None

        self.hazards = self.spawner.spawn(
            self.grid, self.player, self.config.hazard_count_for_level(self.level)
        )
        self.update_filled_percentage()
        self.phase = GamePhase.PLAYING
        logger.info(f"Level {self.level} with {len(self.hazards)} balls")

    # ------------------------------------------------------------------
    # Tick internals
    # ------------------------------------------------------------------

    def _update_player(self):
        """Move the player one cell and run the trail state machine."""
        player = self.player
        next_pos = player.position.moved(player.direction)

        # Pushing against the edge of the world: stay put
        if not self.grid.in_bounds(next_pos.x, next_pos.y):
            return

        next_cell = self.grid.cell_at(next_pos.x, next_pos.y)

        if next_cell == Cell.TRAIL:
            logger.info(f"Player crossed own trail at ({next_pos.x}, {next_pos.y})")
            self._set_phase(GamePhase.LOST)
            return

        if next_cell == Cell.TERRITORY:
            if player.is_drawing:
                self._complete_trail()
            player.position = next_pos
            player.last_move = player.direction
            return

        # Cutting into open space
        player.position = next_pos
        player.last_move = player.direction
        if player.is_drawing:
            player.add_to_trail()
        else:
            player.start_trail()
        self.grid.set(next_pos.x, next_pos.y, Cell.TRAIL)

    def _complete_trail(self):
        """
        Commit the player's trail and capture enclosed territory.

        Marks the trail as Territory, classifies the remaining open space,
        awards score and checks the win threshold.
        """
        trail_length = len(self.player.trail)
        for pos in self.player.trail:
            self.grid.set(pos.x, pos.y, Cell.TERRITORY)

        self.fill_enclosed_areas()
        self.player.clear_trail()

        self.score += int(self.filled_percentage * 100)
        logger.debug(
            f"Trail of {trail_length} cells completed, "
            f"filled {self.filled_percentage:.1%}, score {self.score}"
        )

        if self.filled_percentage >= self.target_percentage:
            self._set_phase(GamePhase.WON)

    def fill_enclosed_areas(self) -> Classification:
        """Run one classification pass around the player's position."""
        result = self.classifier.classify(self.grid, self.player.position, self.hazards)
        self.last_classification = result
        self.update_filled_percentage()
        return result

    def _hazard_collision(self) -> bool:
        """Check whether any hazard touches the player or the open trail."""
        trail = set(self.player.trail) if self.player.is_drawing else set()
        for hazard in self.hazards:
            if hazard.position == self.player.position or hazard.position in trail:
                logger.info(f"Hit by {hazard!r}")
                return True
        return False

    def _set_phase(self, phase: GamePhase):
        if phase != self.phase:
            logger.info(
                f"Phase {self.phase.name} -> {phase.name} "
                f"(level {self.level}, filled {self.filled_percentage:.1%}, score {self.score})"
            )
        self.phase = phase

    def __repr__(self) -> str:
        return (f"Game({self.width}x{self.height}, level={self.level}, "
                f"phase={self.phase.name}, filled={self.filled_percentage:.1%})")
