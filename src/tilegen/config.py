"""
Configuration for tile editing sessions.

Holds the tunables that shape the derived artifacts:
- Grid dimensions in cells and the cell size in pixels
- Merge chances used by the rectangle combiner
- Optional seed for reproducible sessions

The chances only change visual variety; every valid setting produces a
correct tiling.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from tilegen.exceptions import TileSettingsError


# Cell size in pixels (tileset cells are authored at this size)
DEFAULT_CELL_SIZE = 64

# Chance of attempting a 2x2 merge at each cell
DEFAULT_CHANCE_2X2 = 0.2

# Chance of attempting 2x1/1x2 merges at each cell
DEFAULT_CHANCE_OTHER = 0.5

# Default editor viewport in pixels
DEFAULT_VIEWPORT_WIDTH = 1280
DEFAULT_VIEWPORT_HEIGHT = 720


@dataclass
class TileSettings:
    # Grid
    width: int = 20
    height: int = 12
    cell_size: int = DEFAULT_CELL_SIZE

    # Combiner
    chance_2x2: float = DEFAULT_CHANCE_2X2
    chance_other: float = DEFAULT_CHANCE_OTHER

    # Seeding for reproducible sessions
    seed: Optional[int] = None  # None = fresh random source per recompute

    # Debug
    validate_output: bool = False

    def __post_init__(self):
        self.validate()

    @classmethod
    def for_viewport(cls, pixel_width: int = DEFAULT_VIEWPORT_WIDTH,
                     pixel_height: int = DEFAULT_VIEWPORT_HEIGHT,
                     cell_size: int = DEFAULT_CELL_SIZE, **kwargs) -> 'TileSettings':
        """Size the grid so it covers a viewport, rounding partial cells up.

        Args:
            pixel_width: Viewport width in pixels
            pixel_height: Viewport height in pixels
            cell_size: Size of each cell in pixels
            **kwargs: Remaining TileSettings fields

        Returns:
            TileSettings with width/height in cells
        """
        if cell_size <= 0:
            raise TileSettingsError(f"Invalid settings: cell_size must be positive (got {cell_size})")
        return cls(
            width=math.ceil(pixel_width / cell_size),
            height=math.ceil(pixel_height / cell_size),
            cell_size=cell_size,
            **kwargs,
        )

    def validate(self):
        errors: List[str] = []
        if self.width < 1 or self.height < 1:
            errors.append(f"Grid must be at least 1x1 cells (got {self.width}x{self.height})")
        if self.cell_size < 1:
            errors.append(f"cell_size must be positive (got {self.cell_size})")
        if not 0.0 <= self.chance_2x2 <= 1.0:
            errors.append(f"chance_2x2 must be within [0, 1] (got {self.chance_2x2})")
        if not 0.0 <= self.chance_other <= 1.0:
            errors.append(f"chance_other must be within [0, 1] (got {self.chance_other})")
        if errors:
            raise TileSettingsError(f"Invalid settings: {'; '.join(errors)}")
