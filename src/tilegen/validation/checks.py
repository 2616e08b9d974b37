"""
Invariant checks for combined rectangles and edge decals.

Tiling rules:
- TILE-001: rectangle size must be 1x1, 2x1, 1x2 or 2x2
- TILE-002: rectangle covers an empty or out-of-bounds cell
- TILE-003: two rectangles overlap
- TILE-004: occupied cell not covered by any rectangle

Decal rules:
- DECAL-001: exposed side without a decal
- DECAL-002: decal on a side that is not exposed (or on an empty cell)
- DECAL-003: duplicate decal for the same cell and side
- DECAL-004: variant index out of range for the side
"""

from collections import Counter
from typing import Iterable, Optional

import numpy as np

from tilegen.generators.tiles.edge_decals import DECAL_VARIANTS, EdgeDecal, exposed_sides
from tilegen.generators.tiles.occupancy_grid import OccupancyGrid
from tilegen.generators.tiles.rectangle_combiner import RECTANGLE_SIZES, TileRectangle

from .core import ValidationResult, ValidationStage


def validate_tiling(grid: OccupancyGrid, rects: Iterable[TileRectangle]) -> ValidationResult:
    """Check that ``rects`` cover every occupied cell of ``grid`` exactly once."""
    result = ValidationResult(stage=ValidationStage.COMBINE)
    coverage = np.zeros((grid.height, grid.width), dtype=np.int32)

    for rect in rects:
        where = f"{rect.size_name}@({rect.x},{rect.y})"
        if (rect.w, rect.h) not in RECTANGLE_SIZES:
            result.fail("TILE-001", f"Illegal rectangle size {rect.size_name}", where)

        for x, y in rect.cells():
            if not grid.get_tile(x, y):
                result.fail("TILE-002", f"Rectangle covers empty cell ({x},{y})", where)
                continue
            coverage[y, x] += 1
            if coverage[y, x] == 2:
                result.fail("TILE-003", f"Cell ({x},{y}) covered more than once", where)

    missing = np.argwhere(grid.all_tiles() & (coverage == 0))
    for y, x in missing:
        result.fail("TILE-004", f"Occupied cell ({x},{y}) not covered",
                    f"({x},{y})", "Re-run the 1x1 fill pass")
    return result


def validate_decals(grid: OccupancyGrid, decals: Iterable[EdgeDecal],
                    width: Optional[int] = None) -> ValidationResult:
    """Check that decals sit exactly on the exposed sides of occupied cells."""
    result = ValidationResult(stage=ValidationStage.DECALS)
    width = grid.width if width is None else width
    decals = list(decals)

    found = Counter((d.origin_cell_index, d.side) for d in decals)
    for decal in decals:
        if not 0 <= decal.variant_index < DECAL_VARIANTS[decal.side]:
            result.fail("DECAL-004",
                        f"Variant {decal.variant_index} out of range for {decal.side.name}",
                        f"cell {decal.origin_cell_index}")

    expected = set()
    for x, y in grid.iter_occupied():
        index = x + y * width
        for side in exposed_sides(grid, x, y):
            expected.add((index, side))
            if (index, side) not in found:
                result.fail("DECAL-001", f"Missing {side.name} decal", f"({x},{y})")

    for (index, side), count in found.items():
        if (index, side) not in expected:
            result.fail("DECAL-002", f"Unexpected {side.name} decal", f"cell {index}")
        if count > 1:
            result.fail("DECAL-003", f"{count} {side.name} decals on one cell", f"cell {index}")
    return result


def exposed_side_facts(decals: Iterable[EdgeDecal]) -> set:
    """Set of (origin_cell_index, side) pairs, ignoring variants."""
    return {(d.origin_cell_index, d.side) for d in decals}

