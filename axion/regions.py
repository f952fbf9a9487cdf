"""
Region classification after a completed cut.

Once a trail has been committed as Territory, the remaining Open cells fall
apart into one or more regions. One of them is the "outside", the open
world the player keeps cutting into. Every other region is enclosed and is
captured unless a hazard is inside it. Regions holding a hazard stay Open
until a later cut isolates the hazard differently.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from axion.entities import Hazard, Position
from axion.grid import Cell, Grid

logger = logging.getLogger(__name__)


@dataclass
class Classification:
    """Outcome of one classification pass.

    Regions are indexed in row-major discovery order.
    """
    regions: List[List[Position]] = field(default_factory=list)
    outside: Optional[int] = None
    filled: List[int] = field(default_factory=list)
    exempt: List[int] = field(default_factory=list)

    @property
    def cells_filled(self) -> int:
        return sum(len(self.regions[i]) for i in self.filled)


class RegionClassifier:
    """Partitions Open space and captures enclosed, hazard-free regions."""

    def find_regions(self, grid: Grid) -> List[List[Position]]:
        """
        Partition all interior OPEN cells into maximal 4-connected regions.

        Scans in row-major order and grows each region from the first
        unvisited OPEN cell, sharing one visited array across fills.
        """
        visited = grid.new_visited()
        regions = []

        for y in range(1, grid.height - 1):
            for x in range(1, grid.width - 1):
                if visited[y][x] or grid.tiles[y][x] != Cell.OPEN:
                    continue
                region = grid.flood_fill(x, y, visited)
                if region:
                    regions.append(region)

        return regions

    @staticmethod
    def find_outside(regions: List[List[Position]], player_position: Position) -> int:
        """
        Pick the index of the outside region.

        The region containing the player wins. If the player stands on
        Territory, the largest region is used (earliest on ties).
        """
        for index, region in enumerate(regions):
            if player_position in region:
                return index

        return max(range(len(regions)), key=lambda i: len(regions[i]))

    def classify(self, grid: Grid, player_position: Position,
                 hazards: Iterable[Hazard]) -> Classification:
        """
        Fill every enclosed region that contains no hazard.

        Args:
            grid: Board with the finished trail already marked Territory
            player_position: Player's position at completion time
            hazards: Hazards whose positions exempt their regions

        Returns:
            Classification describing which regions were filled
        """
        regions = self.find_regions(grid)
        result = Classification(regions=regions)

        # Nothing enclosed
        if len(regions) <= 1:
            if regions:
                result.outside = 0
            return result

        result.outside = self.find_outside(regions, player_position)
        hazard_cells = [hazard.position for hazard in hazards]

        for index, region in enumerate(regions):
            if index == result.outside:
                continue

            members = set(region)
            hazard_count = sum(1 for pos in hazard_cells if pos in members)

            if hazard_count:
                result.exempt.append(index)
                continue

            for pos in region:
                grid.set(pos.x, pos.y, Cell.TERRITORY)
            result.filled.append(index)

        logger.debug(
            f"Classified {len(regions)} regions: outside={result.outside}, "
            f"filled={len(result.filled)} ({result.cells_filled} cells), "
            f"exempt={len(result.exempt)}"
        )
        return result
