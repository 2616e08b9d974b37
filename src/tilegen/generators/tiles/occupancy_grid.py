"""
Occupancy grid for tile editing.

The grid is a fixed-size boolean field stored as a numpy array indexed
``[y, x]``. Everything outside the grid reads as empty and writes outside it
are dropped, so the combiner and decal scan never special-case the border.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class PixelRect:
    """Axis-aligned rectangle in pixel space."""
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0


class OccupancyGrid:
    """Stores which cells of the grid hold a tile."""

    def __init__(self, width: int, height: int, cell_size: int = 64):
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self._tiles = np.zeros((height, width), dtype=bool)

    @classmethod
    def from_pixel_size(cls, pixel_width: float, pixel_height: float,
                        cell_size: int) -> 'OccupancyGrid':
        """Create a grid covering a pixel area (partial cells round up)."""
        return cls(
            math.ceil(pixel_width / cell_size),
            math.ceil(pixel_height / cell_size),
            cell_size,
        )

    def __repr__(self) -> str:
        return (f"OccupancyGrid({self.width}x{self.height}, "
                f"cell_size={self.cell_size}, occupied={self.occupied_count()})")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_tile(self, x: int, y: int, occupied: bool):
        """Set a cell's state. Out-of-bounds writes are ignored."""
        if self.in_bounds(x, y):
            self._tiles[y, x] = occupied

    def add_tile(self, x: int, y: int):
        self.set_tile(x, y, True)

    def remove_tile(self, x: int, y: int):
        self.set_tile(x, y, False)

    def get_tile(self, x: int, y: int) -> bool:
        """Return True if the cell holds a tile (False when out of bounds)."""
        if self.in_bounds(x, y):
            return bool(self._tiles[y, x])
        return False

    def all_tiles(self) -> np.ndarray:
        """Read-only view of the whole grid, shape ``(height, width)``."""
        view = self._tiles.view()
        view.flags.writeable = False
        return view

    def clear(self):
        self._tiles[:, :] = False

    def cell_index(self, x: int, y: int) -> int:
        """Linear index of a cell (``x + y * width``)."""
        return x + y * self.width

    def cell_rect(self, x: int, y: int) -> PixelRect:
        """Pixel rectangle covering a cell, or an empty rect when out of bounds."""
        if not self.in_bounds(x, y):
            return PixelRect()
        return PixelRect(x * self.cell_size, y * self.cell_size,
                         self.cell_size, self.cell_size)

    def pixel_to_cell(self, px: float, py: float) -> Tuple[int, int]:
        """Convert a pixel position to the cell containing it."""
        return (int(px // self.cell_size), int(py // self.cell_size))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._tiles))

    def iter_occupied(self) -> Iterator[Tuple[int, int]]:
        """Yield occupied cells in row-major order (y outer, x inner)."""
        ys, xs = np.nonzero(self._tiles)
        for y, x in zip(ys, xs):
            yield int(x), int(y)
