"""
Tileset atlas layout.

Maps combined rectangles and edge decals to source rectangles on the tileset
image. Positions below are in tileset cells; multiply by the cell size for
pixels.

    row 0   : TOP decals at columns 5-7
    row 1-2 : 1x1 tiles at columns 0-1, 1x2 tiles at columns 2-3,
              BOTTOM decals (row 1, columns 5-6), RIGHT decal (7, 1),
              LEFT decal (7, 2)
    row 3   : 2x1 tiles at columns 0 and 2
    row 4-7 : 2x2 tiles at (0, 4), (2, 4), (0, 6), (2, 6)
"""

import logging
import os
import random
from typing import Dict, List, Optional, Tuple

from PIL import Image

from tilegen.exceptions import TilesetError
from tilegen.generators.tiles.edge_decals import BlockSide, EdgeDecal
from tilegen.generators.tiles.occupancy_grid import PixelRect
from tilegen.generators.tiles.rectangle_combiner import TileRectangle

logger = logging.getLogger(__name__)

# Atlas extent in cells (columns 0-7, rows 0-7)
ATLAS_COLUMNS = 8
ATLAS_ROWS = 8


# (w, h) -> cells of each variant's top-left corner
RECTANGLE_SOURCE_CELLS: Dict[Tuple[int, int], List[Tuple[int, int]]] = {
    (1, 1): [(0, 1), (1, 1), (0, 2), (1, 2)],
    (2, 1): [(0, 3), (2, 3)],
    (1, 2): [(2, 1), (3, 1)],
    (2, 2): [(0, 4), (2, 4), (0, 6), (2, 6)],
}

DECAL_SOURCE_CELLS: Dict[BlockSide, List[Tuple[int, int]]] = {
    BlockSide.LEFT: [(7, 2)],
    BlockSide.RIGHT: [(7, 1)],
    BlockSide.TOP: [(5, 0), (6, 0), (7, 0)],
    BlockSide.BOTTOM: [(5, 1), (6, 1)],
}


class TilesetAtlas:
    """Source rectangle lookup for a tileset authored at ``cell_size`` pixels."""

    def __init__(self, cell_size: int = 64):
        self.cell_size = cell_size

        # Draw origins subtracted from a decal's anchor
        self._decal_origins: Dict[BlockSide, Tuple[float, float]] = {
            BlockSide.LEFT: (cell_size / 2, 0.0),
            BlockSide.RIGHT: (cell_size / 2, 0.0),
            BlockSide.TOP: (0.0, cell_size / 2.5),
            BlockSide.BOTTOM: (0.0, cell_size / (1 + 2 / 3)),
        }

    def _cell_rect(self, cx: int, cy: int, w: int = 1, h: int = 1) -> PixelRect:
        cs = self.cell_size
        return PixelRect(cx * cs, cy * cs, w * cs, h * cs)

    # -------------------------------------------------------------------
    # Rectangles
    # -------------------------------------------------------------------

    def rectangle_sources(self, w: int, h: int) -> List[PixelRect]:
        """All source rectangles available for a (w, h) tile rectangle."""
        if (w, h) not in RECTANGLE_SOURCE_CELLS:
            w, h = 1, 1
        return [self._cell_rect(cx, cy, w, h) for cx, cy in RECTANGLE_SOURCE_CELLS[(w, h)]]

    def pick_rectangle_sources(self, rects: List[TileRectangle],
                               rng: Optional[random.Random] = None) -> List[PixelRect]:
        """Pick a random source rectangle for each tile rectangle (index-matched)."""
        rng = rng if rng is not None else random.Random()
        return [rng.choice(self.rectangle_sources(r.w, r.h)) for r in rects]

    def rectangle_destination(self, rect: TileRectangle) -> PixelRect:
        """Pixel rectangle a tile rectangle is drawn into."""
        cs = self.cell_size
        return PixelRect(rect.x * cs, rect.y * cs, rect.w * cs, rect.h * cs)

    # -------------------------------------------------------------------
    # Decals
    # -------------------------------------------------------------------

    def decal_source(self, decal: EdgeDecal) -> PixelRect:
        cx, cy = DECAL_SOURCE_CELLS[decal.side][decal.variant_index]
        return self._cell_rect(cx, cy)

    def decal_origin(self, side: BlockSide) -> Tuple[float, float]:
        return self._decal_origins[side]

    def decal_draw_position(self, decal: EdgeDecal) -> Tuple[float, float]:
        """Top-left pixel position to draw a decal's source rectangle at."""
        ox, oy = self._decal_origins[decal.side]
        px, py = decal.position
        return (px - ox, py - oy)


def load_tileset_image(file_path: str, cell_size: int = 64) -> Image.Image:
    """Load a tileset image (TGA, PNG, JPG, BMP) as RGBA.

    Args:
        file_path: Path to the tileset image
        cell_size: Size of one atlas cell in pixels

    Returns:
        RGBA image covering at least the full atlas layout

    Raises:
        TilesetError: If the file is missing, unreadable or too small
    """
    if not os.path.isfile(file_path):
        raise TilesetError(f"Tileset not found: {file_path}")

    try:
        image = Image.open(file_path)
        image.load()
    except OSError as e:
        raise TilesetError(f"Could not read tileset {file_path}: {e}") from e

    if image.mode != 'RGBA':
        image = image.convert('RGBA')

    min_w, min_h = ATLAS_COLUMNS * cell_size, ATLAS_ROWS * cell_size
    width, height = image.size
    if width < min_w or height < min_h:
        raise TilesetError(
            f"Tileset {file_path} is {width}x{height}, needs at least {min_w}x{min_h}"
        )

    logger.info("Loaded tileset %s (%dx%d)", file_path, width, height)
    return image
