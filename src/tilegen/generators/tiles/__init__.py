"""
Tile combination and edge decoration.

Provides:
- OccupancyGrid: bounds-checked boolean tile grid
- RectangleCombiner / combine: randomized 2x2, 2x1, 1x2, 1x1 merging
- EdgeDecalManager / generate_edge_decals: decals on exposed tile sides
- TilesetAtlas: source rectangles for tiles and decals
"""

from .occupancy_grid import OccupancyGrid, PixelRect
from .rectangle_combiner import (
    RECTANGLE_SIZES,
    TileRectangle,
    RectangleCombiner,
    combine,
    can_place_2x2,
    can_place_2x1,
    can_place_1x2,
    summarize_rectangles,
)
from .edge_decals import (
    BlockSide,
    DECAL_VARIANTS,
    EdgeDecal,
    EdgeDecalManager,
    exposed_sides,
    generate_edge_decals,
)
from .tileset import TilesetAtlas, load_tileset_image

__all__ = [
    'OccupancyGrid',
    'PixelRect',
    'RECTANGLE_SIZES',
    'TileRectangle',
    'RectangleCombiner',
    'combine',
    'can_place_2x2',
    'can_place_2x1',
    'can_place_1x2',
    'summarize_rectangles',
    'BlockSide',
    'DECAL_VARIANTS',
    'EdgeDecal',
    'EdgeDecalManager',
    'exposed_sides',
    'generate_edge_decals',
    'TilesetAtlas',
    'load_tileset_image',
]
