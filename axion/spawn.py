"""
Hazard placement at game start and level transitions.

Positions are drawn by rejection sampling from an injected random source,
so a seeded game always starts the same way.
"""

import logging
import random
from typing import List, Optional, Tuple

from axion.config import GameConfig
from axion.entities import Ball, Direction, Player, Position
from axion.grid import Cell, Grid

logger = logging.getLogger(__name__)


class SpawnPolicy:
    """
    Places balls away from the player.

    A candidate cell is rejected if it is not Open or lies within
    ``MIN_SAFE_DISTANCE`` (Manhattan) of the player. Candidates inside the
    danger zone ahead of the player's facing direction are accepted but get
    a velocity that moves away from the player's start along the facing
    axis. A ball that cannot be placed within ``MAX_SPAWN_ATTEMPTS`` draws is
    skipped, so spawning always terminates.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def in_danger_zone(self, candidate: Position, player: Player) -> bool:
        """Check whether a cell lies in the strip ahead of the player."""
        origin = player.position
        length = self.config.DANGER_ZONE_LENGTH
        spread = self.config.DANGER_ZONE_SPREAD
        dx = abs(candidate.x - origin.x)
        dy = abs(candidate.y - origin.y)

        if player.direction == Direction.RIGHT:
            return candidate.x <= origin.x + length and dy <= spread
        if player.direction == Direction.LEFT:
            return candidate.x >= origin.x - length and dy <= spread
        if player.direction == Direction.DOWN:
            return candidate.y <= origin.y + length and dx <= spread
        return candidate.y >= origin.y - length and dx <= spread

    def _random_sign(self) -> int:
        return 1 if self.rng.random() < 0.5 else -1

    def choose_velocity(self, candidate: Position, player: Player) -> Tuple[int, int]:
        """
        Pick a diagonal velocity for a ball placed at ``candidate``.

        Inside the danger zone the component along the facing axis follows
        the facing direction, i.e. away from where the player starts.
        """
        if self.in_danger_zone(candidate, player):
            fx, fy = player.direction.delta
            if player.direction.is_horizontal:
                return fx, self._random_sign()
            return self._random_sign(), fy
        return self._random_sign(), self._random_sign()

    def spawn(self, grid: Grid, player: Player, count: int) -> List[Ball]:
        """
        Place up to ``count`` balls.

        Args:
            grid: Board to place on; only OPEN cells are eligible
            player: Player whose position and facing define the safe zones
            count: Number of balls requested

        Returns:
            The balls placed, possibly fewer than requested
        """
        balls = []
        # Candidates keep one cell clear of the border
        x_range = (2, grid.width - 2)
        y_range = (2, grid.height - 2)

        if x_range[0] >= x_range[1] or y_range[0] >= y_range[1]:
            if count:
                logger.warning(
                    f"Board {grid.width}x{grid.height} too small to place balls; "
                    f"skipping {count}"
                )
            return balls

        for index in range(count):
            for _ in range(self.config.MAX_SPAWN_ATTEMPTS):
                candidate = Position(self.rng.randrange(*x_range),
                                     self.rng.randrange(*y_range))

                if grid.cell_at(candidate.x, candidate.y) != Cell.OPEN:
                    continue
                if candidate.manhattan(player.position) < self.config.MIN_SAFE_DISTANCE:
                    continue

                vx, vy = self.choose_velocity(candidate, player)
                balls.append(Ball(candidate.x, candidate.y, vx, vy))
                break
            else:
                logger.warning(
                    f"Could not find safe position for ball {index} after "
                    f"{self.config.MAX_SPAWN_ATTEMPTS} attempts. Skipping this ball."
                )

        logger.debug(f"Spawned {len(balls)}/{count} balls")
        return balls
