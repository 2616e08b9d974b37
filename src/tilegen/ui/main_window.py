"""
Main application window for the tile editor.

Hosts the tile canvas and a small menu bar. Mouse controls:
left click adds a tile, right click removes it, middle click toggles the
debug overlay.
"""

import logging
from typing import Optional

from PyQt5.QtWidgets import QAction, QFileDialog, QMainWindow

from tilegen.config import TileSettings
from tilegen.generators.tiles import summarize_rectangles
from tilegen.pipeline import TileEditSession
from tilegen.ui import style_constants as sc
from tilegen.ui.tile_canvas import TileCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):

    def __init__(self, settings: Optional[TileSettings] = None,
                 tileset_path: Optional[str] = None):
        super().__init__()
        self.session = TileEditSession(settings or TileSettings.for_viewport())

        self._setup_ui()
        self._setup_menu_bar()
        self._connect_signals()

        if tileset_path:
            self.canvas.set_tileset(tileset_path)
        self.canvas.set_debug_overlay(sc.debug_overlay_default())

    # ---------------------------------------------------------------
    # UI setup
    # ---------------------------------------------------------------

    def _setup_ui(self):
        self.setWindowTitle("Tile Generator")
        grid = self.session.grid
        self.canvas = TileCanvas(self.session, self)
        self.setCentralWidget(self.canvas)
        self.resize(grid.width * grid.cell_size + 40, grid.height * grid.cell_size + 80)
        self.statusBar().showMessage("Ready - left click adds, right click removes, middle click toggles overlay")

    def _setup_menu_bar(self):
        """Create the File, Edit and View menus."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        tileset_action = QAction("Load &Tileset...", self)
        tileset_action.setShortcut("Ctrl+O")
        tileset_action.setToolTip("Load the tileset image used to draw tiles and decals")
        tileset_action.triggered.connect(self._on_load_tileset)
        file_menu.addAction(tileset_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        edit_menu = menu_bar.addMenu("&Edit")

        clear_action = QAction("&Clear Tiles", self)
        clear_action.setShortcut("Ctrl+Shift+N")
        clear_action.triggered.connect(self._on_clear)
        edit_menu.addAction(clear_action)

        regenerate_action = QAction("&Regenerate", self)
        regenerate_action.setShortcut("Ctrl+R")
        regenerate_action.setToolTip("Re-run the combiner and decal scan on the current tiles")
        regenerate_action.triggered.connect(self._on_regenerate)
        edit_menu.addAction(regenerate_action)

        view_menu = menu_bar.addMenu("&View")

        overlay_action = QAction("Toggle &Debug Overlay", self)
        overlay_action.setShortcut("Ctrl+D")
        overlay_action.triggered.connect(
            lambda: self.canvas.set_debug_overlay(not self.session.debug_overlay))
        view_menu.addAction(overlay_action)

    def _connect_signals(self):
        self.canvas.tiles_changed.connect(self._on_tiles_changed)
        self.canvas.cell_hovered.connect(self._on_cell_hovered)
        self.canvas.debug_overlay_toggled.connect(sc.save_debug_overlay)

    # ---------------------------------------------------------------
    # Handlers
    # ---------------------------------------------------------------

    def _on_load_tileset(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Load Tileset", "", "Images (*.png *.tga *.bmp *.jpg)")
        if path and not self.canvas.set_tileset(path):
            self.statusBar().showMessage(f"Could not load tileset: {path}")

    def _on_clear(self):
        self.session.clear()
        self.canvas.refresh()

    def _on_regenerate(self):
        self.session.regenerate()
        self.canvas.refresh()

    def _on_tiles_changed(self, rect_count: int, decal_count: int):
        summary = summarize_rectangles(list(self.session.rectangles))
        sizes = ", ".join(f"{name}: {count}" for name, count in summary.items())
        self.statusBar().showMessage(
            f"{rect_count} rectangles ({sizes}) - {decal_count} decals")

    def _on_cell_hovered(self, x: int, y: int):
        self.setWindowTitle(f"Tile Generator - cell ({x}, {y})")
