"""
Tile editing session.

Owns the occupancy grid and everything derived from it. Every edit runs the
full sequence

    mutate grid -> recombine rectangles -> pick tileset sources -> redecal

while holding one lock, so a concurrent reader using ``snapshot()`` never
sees rectangles or decals that disagree with the grid.
"""

import logging
import random
import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tilegen.config import TileSettings
from tilegen.generators.tiles import (
    EdgeDecal,
    EdgeDecalManager,
    OccupancyGrid,
    PixelRect,
    RectangleCombiner,
    TileRectangle,
    TilesetAtlas,
    summarize_rectangles,
)
from tilegen.validation import validate_decals, validate_tiling

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TileSnapshot:
    """Consistent view of a session's derived artifacts."""
    rectangles: Tuple[TileRectangle, ...]
    rectangle_sources: Tuple[PixelRect, ...]  # index-matched with rectangles
    decals: Tuple[EdgeDecal, ...]
    debug_overlay: bool = False


class TileEditSession:
    """Edits one occupancy grid and keeps its rectangles and decals current."""

    def __init__(self, settings: Optional[TileSettings] = None,
                 rng: Optional[random.Random] = None):
        self.settings = settings or TileSettings()

        # A seeded session replays the same sequence of random choices
        if rng is None and self.settings.seed is not None:
            rng = random.Random(self.settings.seed)
        self.rng = rng

        self.grid = OccupancyGrid(self.settings.width, self.settings.height,
                                  self.settings.cell_size)
        self.combiner = RectangleCombiner(self.settings.chance_2x2,
                                          self.settings.chance_other, rng)
        self.decal_manager = EdgeDecalManager(rng)
        self.atlas = TilesetAtlas(self.settings.cell_size)
        self.debug_overlay = False

        self._lock = threading.RLock()
        self._rectangles: List[TileRectangle] = []
        self._rectangle_sources: List[PixelRect] = []

        logger.info("Tile session: %dx%d cells, %dpx, seed=%s",
                    self.grid.width, self.grid.height, self.grid.cell_size,
                    self.settings.seed)

    # -- edits --

    def set_tile(self, x: int, y: int, occupied: bool) -> bool:
        """Set a cell and rebuild the derived artifacts.

        Returns:
            False when (x, y) is outside the grid (nothing changes)
        """
        with self._lock:
            if not self.grid.in_bounds(x, y):
                return False
            self.grid.set_tile(x, y, occupied)
            self._regenerate()
            return True

    def add_tile(self, x: int, y: int) -> bool:
        return self.set_tile(x, y, True)

    def remove_tile(self, x: int, y: int) -> bool:
        return self.set_tile(x, y, False)

    def clear(self):
        with self._lock:
            self.grid.clear()
            self._regenerate()

    def regenerate(self):
        """Recompute rectangles and decals for the current grid."""
        with self._lock:
            self._regenerate()

    def toggle_debug_overlay(self) -> bool:
        self.debug_overlay = not self.debug_overlay
        return self.debug_overlay

    # -- derived data --

    @property
    def rectangles(self) -> Tuple[TileRectangle, ...]:
        with self._lock:
            return tuple(self._rectangles)

    @property
    def decals(self) -> Tuple[EdgeDecal, ...]:
        with self._lock:
            return self.decal_manager.decals

    def snapshot(self) -> TileSnapshot:
        with self._lock:
            return TileSnapshot(
                rectangles=tuple(self._rectangles),
                rectangle_sources=tuple(self._rectangle_sources),
                decals=self.decal_manager.decals,
                debug_overlay=self.debug_overlay,
            )

    def _regenerate(self):
        self._rectangles = self.combiner.combine(self.grid)
        self._rectangle_sources = self.atlas.pick_rectangle_sources(self._rectangles, self.rng)
        self.decal_manager.create_edge_decals(self.grid)

        logger.debug("Regenerated: %s, %d decals",
                     summarize_rectangles(self._rectangles), len(self.decal_manager))

        if self.settings.validate_output:
            self._validate()

    def _validate(self):
        result = validate_tiling(self.grid, self._rectangles)
        result.merge(validate_decals(self.grid, self.decal_manager.decals))
        if result.issues:
            logger.warning("Validation found %s", result.code_counts())
        for issue in result.issues:
            logger.warning("Validation: %s", issue.format())
