"""Board-building and driving helpers shared by the test modules."""

from typing import Iterable

from axion.entities import Direction, Hazard, Position
from axion.game import Game, GamePhase
from axion.grid import Cell, Grid


def drive(game: Game, moves: Iterable[Direction]) -> GamePhase:
    """Apply one direction request and one tick per move."""
    for direction in moves:
        if game.phase != GamePhase.PLAYING:
            break
        game.set_direction(direction)
        game.update()
    return game.phase


def place_player(game: Game, x: int, y: int, direction: Direction):
    game.player.position = Position(x, y)
    game.player.direction = direction
    game.player.last_move = None
    game.player.clear_trail()


def add_wall_column(grid: Grid, x: int):
    """Mark a full interior column as Territory."""
    for y in range(1, grid.height - 1):
        grid.set(x, y, Cell.TERRITORY)


def region_cells(grid: Grid, x_start: int, x_stop: int):
    """Interior cells of columns ``x_start`` up to ``x_stop`` (exclusive)."""
    return [(x, y) for y in range(1, grid.height - 1) for x in range(x_start, x_stop)]


def border_is_territory(grid: Grid) -> bool:
    for x in range(grid.width):
        if grid.cell_at(x, 0) != Cell.TERRITORY or grid.cell_at(x, grid.height - 1) != Cell.TERRITORY:
            return False
    for y in range(grid.height):
        if grid.cell_at(0, y) != Cell.TERRITORY or grid.cell_at(grid.width - 1, y) != Cell.TERRITORY:
            return False
    return True


class ParkedHazard(Hazard):
    """A hazard that never moves, for pinning a hazard inside a region."""

    def __init__(self, x: int, y: int):
        self.position = Position(x, y)

    def update(self, grid: Grid) -> None:
        pass
