"""
Actors of the simulation: the player and the hazards that hunt it.

Hazards share a narrow interface (a position plus a tick update given a
read-only board) so the controller can drive any hazard kind the same way.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from axion.grid import Grid


# ============================================================================
# GEOMETRY
# ============================================================================

class Direction(Enum):
    """Facing direction of the player. Y grows downward."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        """One-cell step as (dx, dy)."""
        return self.value

    @property
    def opposite(self) -> "Direction":
        """The reverse direction."""
        dx, dy = self.value
        return Direction((-dx, -dy))

    @property
    def is_horizontal(self) -> bool:
        """True for LEFT and RIGHT."""
        return self.value[1] == 0


@dataclass(frozen=True)
class Position:
    """Integer board coordinate."""
    x: int
    y: int

    def moved(self, direction: Direction) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def manhattan(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


# ============================================================================
# PLAYER
# ============================================================================

class Player:
    """
    Represents the player's cutter.

    The player moves along Territory and cuts trails into Open space.
    Returning to Territory completes the trail and captures the enclosed
    area. ``trail`` is non-empty exactly while ``is_drawing`` is set.
    ``last_move`` is the direction of the most recent step, which can lag
    behind ``direction`` between ticks.
    """

    __slots__ = ['position', 'direction', 'last_move', 'is_drawing', 'trail']

    def __init__(self, x: int, y: int, direction: Direction = Direction.RIGHT):
        self.position = Position(x, y)
        self.direction = direction
        self.last_move: Optional[Direction] = None  # Direction of the last step taken
        self.is_drawing = False         # Currently cutting a trail
        self.trail: List[Position] = []  # Trail cells in draw order

    def start_trail(self):
        """Begin a new trail at the current position."""
        self.is_drawing = True
        self.trail = [self.position]

    def add_to_trail(self):
        if self.is_drawing:
            self.trail.append(self.position)

    def clear_trail(self):
        """Drop the trail and return to the safe state."""
        self.trail = []
        self.is_drawing = False

    def __repr__(self) -> str:
        return (f"Player(position=({self.position.x}, {self.position.y}), "
                f"direction={self.direction.name}, trail={len(self.trail)})")


# ============================================================================
# HAZARDS
# ============================================================================

class Hazard(ABC):
    """A mobile obstacle. Touching the player or an open trail is fatal."""

    position: Position

    @abstractmethod
    def update(self, grid: "Grid") -> None:
        """Advance one tick; ``grid`` is only read."""


class Ball(Hazard):
    """
    Diagonal bouncer.

    Moves one cell per tick on each axis and reflects off the border and
    Territory. Each axis reflects on its own, so a ball grazing a wall keeps
    its motion along that wall. Trail cells do not obstruct a ball.
    """

    __slots__ = ['position', 'velocity']

    def __init__(self, x: int, y: int, vx: int = 1, vy: int = 1):
        self.position = Position(x, y)
        self.velocity = (vx, vy)

    @staticmethod
    def _blocked(grid: "Grid", x: int, y: int, coord: int, limit: int) -> bool:
        return coord <= 0 or coord >= limit - 1 or grid.is_territory(x, y)

    def update(self, grid: "Grid") -> None:
        x, y = self.position.x, self.position.y
        vx, vy = self.velocity

        next_x = x + vx
        if self._blocked(grid, next_x, y, next_x, grid.width):
            vx = -vx
            next_x = x + vx
            # Walled in on both sides along this axis
            if self._blocked(grid, next_x, y, next_x, grid.width):
                next_x = x

        next_y = y + vy
        if self._blocked(grid, x, next_y, next_y, grid.height):
            vy = -vy
            next_y = y + vy
            if self._blocked(grid, x, next_y, next_y, grid.height):
                next_y = y

        # Outside corner: both axes are clear but the diagonal is solid
        if grid.is_territory(next_x, next_y):
            vx, vy = -vx, -vy
            next_x, next_y = x, y

        self.position = Position(next_x, next_y)
        self.velocity = (vx, vy)

    def __repr__(self) -> str:
        return f"Ball(({self.position.x}, {self.position.y}), velocity={self.velocity})"
