"""
Board model for the territory-capture simulation.

The board is a fixed-size rectangle of cells. The outermost ring of cells
is the play-field border and is permanently Territory; every read outside
the rectangle also resolves to Territory, so callers never need their own
bounds checks.
"""

from enum import IntEnum
from typing import Iterator, List, Optional

from axion.entities import Position


class Cell(IntEnum):
    """Represents the state of a board cell."""
    OPEN = 0       # Unclaimed interior
    TERRITORY = 1  # Owned, including the border
    TRAIL = 2      # Player's in-progress cut


class Grid:
    """
    Manages the board state and territory calculations.

    Cells are stored row-major as ``tiles[y][x]``. Fill percentage is cached
    and invalidated on every write.
    """

    __slots__ = ['width', 'height', 'tiles', '_fill_cache', '_cache_valid']

    def __init__(self, width: int, height: int):
        """
        Initialize board with borders around the perimeter.

        Args:
            width: Board width in cells
            height: Board height in cells
        """
        self.width = width
        self.height = height
        self.tiles = [[Cell.OPEN] * width for _ in range(height)]
        self._fill_cache = 0.0
        self._cache_valid = False
        self._initialize_borders()

    def _initialize_borders(self):
        """Set up border cells around the perimeter."""
        for x in range(self.width):
            self.tiles[0][x] = Cell.TERRITORY
            self.tiles[self.height - 1][x] = Cell.TERRITORY

        for y in range(self.height):
            self.tiles[y][0] = Cell.TERRITORY
            self.tiles[y][self.width - 1] = Cell.TERRITORY

        self._cache_valid = False

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        """Check if coordinates lie on the outer frame."""
        return (x == 0 or y == 0 or
                x == self.width - 1 or y == self.height - 1)

    def is_interior(self, x: int, y: int) -> bool:
        """Check if coordinates lie strictly inside the frame."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Get cell state at coordinates.

        Returns TERRITORY if out of bounds: the world outside the board is
        solid.
        """
        if not self.in_bounds(x, y):
            return Cell.TERRITORY
        return self.tiles[y][x]

    def is_territory(self, x: int, y: int) -> bool:
        """Check if a cell is captured ground, including anything off the board."""
        return self.cell_at(x, y) == Cell.TERRITORY

    def set(self, x: int, y: int, cell: Cell):
        """Set an interior cell and invalidate the fill cache.

        Border and out-of-range writes are ignored.
        """
        if self.is_interior(x, y):
            self.tiles[y][x] = cell
            self._cache_valid = False

    def clear_interior(self):
        """Reset every interior cell to OPEN."""
        for y in range(1, self.height - 1):
            row = self.tiles[y]
            for x in range(1, self.width - 1):
                row[x] = Cell.OPEN
        self._cache_valid = False

    def interior_cells(self) -> Iterator[Position]:
        """Yield interior positions in row-major order."""
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                yield Position(x, y)

    @property
    def interior_area(self) -> int:
        return (self.width - 2) * (self.height - 2)

    def count(self, cell: Cell) -> int:
        """Count interior cells in the given state."""
        return sum(
            1
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if self.tiles[y][x] == cell
        )

    def calculate_fill_percentage(self) -> float:
        """
        Calculate the fraction of interior cells that are Territory.

        Returns:
            Float between 0.0 and 1.0
        """
        if self._cache_valid:
            return self._fill_cache

        total = self.interior_area
        filled = self.count(Cell.TERRITORY)

        self._fill_cache = filled / total if total > 0 else 0.0
        self._cache_valid = True
        return self._fill_cache

    def new_visited(self) -> List[List[bool]]:
        """Visited marker array sized to the board."""
        return [[False] * self.width for _ in range(self.height)]

    def flood_fill(self, start_x: int, start_y: int,
                   visited: Optional[List[List[bool]]] = None) -> List[Position]:
        """
        Collect the 4-connected region of OPEN cells containing a start cell.

        Uses an explicit stack so large boards never hit the recursion limit.

        Args:
            start_x: Starting X coordinate
            start_y: Starting Y coordinate
            visited: Optional marker array shared across calls; cells already
                marked are not revisited

        Returns:
            Positions of the region in discovery order, empty if the start
            cell is not an unvisited OPEN interior cell
        """
        if visited is None:
            visited = self.new_visited()

        region = []
        stack = [(start_x, start_y)]

        while stack:
            x, y = stack.pop()

            if not self.is_interior(x, y):
                continue
            if visited[y][x] or self.tiles[y][x] != Cell.OPEN:
                continue

            visited[y][x] = True
            region.append(Position(x, y))

            stack.append((x + 1, y))
            stack.append((x - 1, y))
            stack.append((x, y + 1))
            stack.append((x, y - 1))

        return region

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, filled={self.calculate_fill_percentage():.1%})"
