"""
Edge decals for occupied tiles.

A decal is placed on every side of an occupied cell whose neighbour in that
direction is empty or outside the grid. Sides differ in how many visual
variants they offer:

- LEFT / RIGHT: 1 variant
- TOP: 3 variants (picked at random per decal)
- BOTTOM: 2 variants (picked at random per decal)

Decal positions are pixel-space anchors: LEFT and TOP at the cell's top-left
corner, RIGHT at its top-right corner, BOTTOM at its bottom-left corner.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from tilegen.generators.tiles.occupancy_grid import OccupancyGrid

logger = logging.getLogger(__name__)


class BlockSide(Enum):
    """Side of a tile that a decal is attached to."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def offset(self) -> Tuple[int, int]:
        """(dx, dy) of the neighbour on this side (y grows downward)."""
        offsets = {
            BlockSide.LEFT: (-1, 0),
            BlockSide.RIGHT: (1, 0),
            BlockSide.TOP: (0, -1),
            BlockSide.BOTTOM: (0, 1),
        }
        return offsets[self]


# Number of visual variants per side
DECAL_VARIANTS: Dict[BlockSide, int] = {
    BlockSide.LEFT: 1,
    BlockSide.RIGHT: 1,
    BlockSide.TOP: 3,
    BlockSide.BOTTOM: 2,
}


@dataclass(frozen=True)
class EdgeDecal:
    """A decal attached to one side of an occupied cell.

    Attributes:
        side: Side of the cell the decal sits on
        variant_index: Which of the side's visual variants to draw
        position: Anchor in pixel space (see module docstring)
        origin_cell_index: ``x + y * width`` of the cell the decal belongs to
    """
    side: BlockSide
    variant_index: int
    position: Tuple[float, float]
    origin_cell_index: int


def _anchor(side: BlockSide, x: int, y: int, cell_size: int) -> Tuple[float, float]:
    if side == BlockSide.RIGHT:
        return (float((x + 1) * cell_size), float(y * cell_size))
    if side == BlockSide.BOTTOM:
        return (float(x * cell_size), float((y + 1) * cell_size))
    return (float(x * cell_size), float(y * cell_size))


def exposed_sides(grid: OccupancyGrid, x: int, y: int,
                  width: Optional[int] = None,
                  height: Optional[int] = None) -> List[BlockSide]:
    """Return the exposed sides of an occupied cell (LEFT, RIGHT, TOP, BOTTOM order).

    A side is exposed when the cell sits on that edge of the grid or the
    neighbour on that side is empty. Empty cells have no exposed sides.
    """
    width = grid.width if width is None else width
    height = grid.height if height is None else height

    if not grid.get_tile(x, y):
        return []

    sides = []
    if x == 0 or not grid.get_tile(x - 1, y):
        sides.append(BlockSide.LEFT)
    if x == width - 1 or not grid.get_tile(x + 1, y):
        sides.append(BlockSide.RIGHT)
    if y == 0 or not grid.get_tile(x, y - 1):
        sides.append(BlockSide.TOP)
    if y == height - 1 or not grid.get_tile(x, y + 1):
        sides.append(BlockSide.BOTTOM)
    return sides


def generate_edge_decals(grid: OccupancyGrid,
                         width: Optional[int] = None,
                         height: Optional[int] = None,
                         cell_size: Optional[int] = None,
                         rng: Optional[random.Random] = None) -> List[EdgeDecal]:
    """Create a decal for every (occupied cell, exposed side) pair.

    Args:
        grid: Occupancy grid to scan
        width: Grid width in cells (defaults to ``grid.width``)
        height: Grid height in cells (defaults to ``grid.height``)
        cell_size: Cell size in pixels (defaults to ``grid.cell_size``)
        rng: Random source for variant choice. None creates a fresh one.

    Returns:
        Decals in row-major cell order, LEFT/RIGHT/TOP/BOTTOM within a cell
    """
    width = grid.width if width is None else width
    height = grid.height if height is None else height
    cell_size = grid.cell_size if cell_size is None else cell_size
    rng = rng if rng is not None else random.Random()

    decals: List[EdgeDecal] = []
    for y in range(height):
        for x in range(width):
            if not grid.get_tile(x, y):
                continue

            cell_index = x + y * width
            for side in exposed_sides(grid, x, y, width, height):
                variants = DECAL_VARIANTS[side]
                variant = rng.randrange(variants) if variants > 1 else 0
                decals.append(EdgeDecal(
                    side=side,
                    variant_index=variant,
                    position=_anchor(side, x, y, cell_size),
                    origin_cell_index=cell_index,
                ))
    return decals


class EdgeDecalManager:
    """Holds the current decal set and supports removal by cell.

    The decal list is append-only between rebuilds; removal builds a new
    compacted list instead of deleting while iterating.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng
        self._decals: List[EdgeDecal] = []

    def __len__(self) -> int:
        return len(self._decals)

    def __iter__(self) -> Iterator[EdgeDecal]:
        return iter(tuple(self._decals))

    @property
    def decals(self) -> Tuple[EdgeDecal, ...]:
        return tuple(self._decals)

    def create_edge_decals(self, grid: OccupancyGrid,
                           width: Optional[int] = None,
                           height: Optional[int] = None,
                           cell_size: Optional[int] = None):
        """Discard the old decals and rescan the whole grid."""
        self._decals = generate_edge_decals(grid, width, height, cell_size, self.rng)
        logger.debug("Created %d edge decals", len(self._decals))

    def clear(self):
        self._decals = []

    def decals_for_cell(self, cell_index: int) -> List[EdgeDecal]:
        return [d for d in self._decals if d.origin_cell_index == cell_index]

    def block_destroyed(self, cell_index: int) -> int:
        """Remove every decal attached to ``cell_index``.

        Returns:
            Number of decals removed
        """
        kept = [d for d in self._decals if d.origin_cell_index != cell_index]
        removed = len(self._decals) - len(kept)
        self._decals = kept
        return removed

    def block_destroyed_at(self, x: int, y: int, width: int) -> int:
        """Remove the decals of the cell at (x, y) in a grid ``width`` cells wide."""
        return self.block_destroyed(x + y * width)
