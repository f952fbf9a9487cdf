"""
Game configuration.

All tunable constants for the simulation and the pygame frontend live in
one dataclass so tests can build small boards without touching globals.
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """Configuration settings for board dimensions, rules and timing."""

    # Board dimensions (cells, including the border)
    GRID_WIDTH: int = 40
    GRID_HEIGHT: int = 30

    # Game mechanics
    FILL_THRESHOLD: float = 0.75  # Win condition (75% territory)

    # Hazard spawning
    CELLS_PER_HAZARD: int = 267   # Initial hazard density
    LEVEL_HAZARD_BASE: int = 2    # Hazards at level N = base + N
    MIN_SAFE_DISTANCE: int = 5    # Manhattan distance from player
    DANGER_ZONE_LENGTH: int = 10  # Cells ahead of the player's facing
    DANGER_ZONE_SPREAD: int = 10  # Cells to either side of the facing axis
    MAX_SPAWN_ATTEMPTS: int = 1000

    # Display and pacing (frontend only)
    TILE_SIZE: int = 16
    HUD_HEIGHT: int = 24
    FPS: int = 60
    TICK_INTERVAL_MS: int = 100   # 10 simulation ticks per second

    def __post_init__(self):
        if self.GRID_WIDTH < 3 or self.GRID_HEIGHT < 3:
            raise ValueError(
                f"Board must be at least 3x3 to have an interior, "
                f"got {self.GRID_WIDTH}x{self.GRID_HEIGHT}"
            )
        if not 0.0 < self.FILL_THRESHOLD <= 1.0:
            raise ValueError(
                f"FILL_THRESHOLD must be in (0, 1], got {self.FILL_THRESHOLD}"
            )

    @property
    def interior_area(self) -> int:
        """Number of non-border cells."""
        return (self.GRID_WIDTH - 2) * (self.GRID_HEIGHT - 2)

    @property
    def initial_hazard_count(self) -> int:
        """Hazards placed at game start, scaled to board area."""
        area = self.GRID_WIDTH * self.GRID_HEIGHT
        return max(1, round(area / self.CELLS_PER_HAZARD))

    def hazard_count_for_level(self, level: int) -> int:
        return self.LEVEL_HAZARD_BASE + level

    @property
    def screen_width(self) -> int:
        return self.GRID_WIDTH * self.TILE_SIZE

    @property
    def screen_height(self) -> int:
        return self.GRID_HEIGHT * self.TILE_SIZE
