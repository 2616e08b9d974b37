"""
Rectangle combiner for occupied tiles.

Merges occupied cells into 2x2, 2x1, 1x2 and 1x1 rectangles so a renderer can
draw larger, varied tileset pieces instead of a uniform 1x1 pattern.

Algorithm (three passes, each in row-major order):
1. 2x2 pass: at each cell, with ``chance_2x2``, merge a fully occupied and
   unclaimed 2x2 block.
2. 2x1/1x2 pass: at each cell, with ``chance_other``, try both pair
   orientations in a random order.
3. 1x1 pass: every occupied cell still unclaimed becomes a 1x1.

All passes share one claimed array, so a cell is covered exactly once. The
result is deliberately not a minimal cover: re-running on the same grid can
give a different (still valid) set of rectangles.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from tilegen.config import DEFAULT_CHANCE_2X2, DEFAULT_CHANCE_OTHER
from tilegen.generators.tiles.occupancy_grid import OccupancyGrid

logger = logging.getLogger(__name__)


# Rectangle sizes the combiner may emit, as (w, h)
RECTANGLE_SIZES: Tuple[Tuple[int, int], ...] = ((2, 2), (2, 1), (1, 2), (1, 1))


@dataclass(frozen=True)
class TileRectangle:
    """A group of tiles represented as one rectangle (tile coordinates)."""
    x: int
    y: int
    w: int = 1
    h: int = 1

    @property
    def size_name(self) -> str:
        return f"{self.w}x{self.h}"

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the (x, y) cells covered by this rectangle."""
        for dy in range(self.h):
            for dx in range(self.w):
                yield self.x + dx, self.y + dy


# =============================================================================
# Merge predicates
# =============================================================================

def _area_free(grid: OccupancyGrid, claimed: np.ndarray,
               x: int, y: int, w: int, h: int) -> bool:
    for dy in range(h):
        for dx in range(w):
            if not grid.get_tile(x + dx, y + dy):
                return False
    # Occupancy check above keeps the slice inside the grid
    return not claimed[y:y + h, x:x + w].any()


def can_place_2x2(grid: OccupancyGrid, claimed: np.ndarray, x: int, y: int) -> bool:
    """Check if a 2x2 rectangle fits with its top-left at (x, y)."""
    return _area_free(grid, claimed, x, y, 2, 2)


def can_place_2x1(grid: OccupancyGrid, claimed: np.ndarray, x: int, y: int) -> bool:
    """Check if a horizontal pair fits at (x, y) and (x + 1, y)."""
    return _area_free(grid, claimed, x, y, 2, 1)


def can_place_1x2(grid: OccupancyGrid, claimed: np.ndarray, x: int, y: int) -> bool:
    """Check if a vertical pair fits at (x, y) and (x, y + 1)."""
    return _area_free(grid, claimed, x, y, 1, 2)


# =============================================================================
# Combiner
# =============================================================================

class RectangleCombiner:
    """Combines occupied tiles into 2x2, 2x1, 1x2 and 1x1 rectangles.

    Args:
        chance_2x2: Chance of attempting a 2x2 merge at each cell
        chance_other: Chance of attempting 2x1/1x2 merges at each cell
        rng: Random source. When None a fresh ``random.Random()`` is created
            for every ``combine`` call.
    """

    def __init__(self, chance_2x2: float = DEFAULT_CHANCE_2X2,
                 chance_other: float = DEFAULT_CHANCE_OTHER,
                 rng: Optional[random.Random] = None):
        self.chance_2x2 = chance_2x2
        self.chance_other = chance_other
        self.rng = rng

    def combine(self, grid: OccupancyGrid) -> List[TileRectangle]:
        """Partition every occupied cell of ``grid`` into rectangles.

        Args:
            grid: Occupancy grid to read

        Returns:
            Rectangles in emission order (2x2 pass, pair pass, 1x1 pass)
        """
        rng = self.rng if self.rng is not None else random.Random()

        rects: List[TileRectangle] = []
        claimed = np.zeros((grid.height, grid.width), dtype=bool)

        self._create_2x2_chunks(grid, claimed, rects, rng)
        self._create_other_chunks(grid, claimed, rects, rng)
        self._create_1x1_chunks(grid, claimed, rects)

        logger.debug("Combined %d tiles into %d rectangles",
                     grid.occupied_count(), len(rects))
        return rects

    def _create_2x2_chunks(self, grid: OccupancyGrid, claimed: np.ndarray,
                           rects: List[TileRectangle], rng: random.Random):
        for y in range(grid.height):
            for x in range(grid.width):
                if rng.random() >= self.chance_2x2:
                    continue
                if can_place_2x2(grid, claimed, x, y):
                    self._claim(TileRectangle(x, y, 2, 2), claimed, rects)

    def _create_other_chunks(self, grid: OccupancyGrid, claimed: np.ndarray,
                             rects: List[TileRectangle], rng: random.Random):
        for y in range(grid.height):
            for x in range(grid.width):
                if rng.random() >= self.chance_other:
                    continue

                if rng.random() >= 0.5:
                    order = ((can_place_1x2, 1, 2), (can_place_2x1, 2, 1))
                else:
                    order = ((can_place_2x1, 2, 1), (can_place_1x2, 1, 2))

                # The second attempt sees the claims of the first
                for fits, w, h in order:
                    if fits(grid, claimed, x, y):
                        self._claim(TileRectangle(x, y, w, h), claimed, rects)

    def _create_1x1_chunks(self, grid: OccupancyGrid, claimed: np.ndarray,
                           rects: List[TileRectangle]):
        for x, y in grid.iter_occupied():
            if not claimed[y, x]:
                self._claim(TileRectangle(x, y, 1, 1), claimed, rects)

    @staticmethod
    def _claim(rect: TileRectangle, claimed: np.ndarray,
               rects: List[TileRectangle]):
        rects.append(rect)
        claimed[rect.y:rect.y + rect.h, rect.x:rect.x + rect.w] = True


def combine(grid: OccupancyGrid, rng: Optional[random.Random] = None,
            chance_2x2: float = DEFAULT_CHANCE_2X2,
            chance_other: float = DEFAULT_CHANCE_OTHER) -> List[TileRectangle]:
    """Combine the occupied cells of ``grid`` into rectangles."""
    return RectangleCombiner(chance_2x2, chance_other, rng).combine(grid)


def summarize_rectangles(rects: List[TileRectangle]) -> Dict[str, int]:
    """Count rectangles by size name ("2x2", "2x1", "1x2", "1x1")."""
    summary = {f"{w}x{h}": 0 for w, h in RECTANGLE_SIZES}
    for rect in rects:
        summary[rect.size_name] = summary.get(rect.size_name, 0) + 1
    return summary
