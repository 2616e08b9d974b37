"""
QGraphicsView-based canvas for the tile editor.

Provides:
- Left click adds a tile, right click removes it
- Middle click toggles the debug overlay (rectangle sizes)
- Tileset rendering when an image is loaded, flat colors otherwise
"""

import logging
from typing import Optional

from PyQt5.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QImage, QMouseEvent, QPainter, QPen, QPixmap
from PyQt5.QtWidgets import QGraphicsScene, QGraphicsView

from tilegen.exceptions import TilesetError
from tilegen.generators.tiles import BlockSide, EdgeDecal, PixelRect, load_tileset_image
from tilegen.pipeline import TileEditSession, TileSnapshot
from tilegen.ui import style_constants as sc

logger = logging.getLogger(__name__)


def _qrect(rect: PixelRect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.w, rect.h)


class TileCanvas(QGraphicsView):
    """Grid canvas that edits a TileEditSession."""

    # Signals
    tiles_changed = pyqtSignal(int, int)  # Emitted with (rectangle count, decal count)
    cell_hovered = pyqtSignal(int, int)  # Emitted with cell coordinates on hover
    debug_overlay_toggled = pyqtSignal(bool)

    def __init__(self, session: TileEditSession, parent=None):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._session = session
        self._snapshot: TileSnapshot = session.snapshot()
        self._tileset: Optional[QPixmap] = None

        self._setup_view()

    def _setup_view(self):
        """Configure view settings."""
        grid = self._session.grid
        self.setRenderHints(QPainter.SmoothPixmapTransform)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setMouseTracking(True)
        self.setBackgroundBrush(QBrush(QColor(sc.BACKGROUND_COLOR)))
        self._scene.setSceneRect(0, 0, grid.width * grid.cell_size,
                                 grid.height * grid.cell_size)

    # ---------------------------------------------------------------
    # Session
    # ---------------------------------------------------------------

    @property
    def session(self) -> TileEditSession:
        return self._session

    def set_tileset(self, path: str) -> bool:
        """Load the tileset image. Returns False if it could not be used."""
        try:
            image = load_tileset_image(path, self._session.grid.cell_size)
        except TilesetError as e:
            logger.warning("%s", e)
            return False
        data = image.tobytes()
        qimage = QImage(data, image.width, image.height, image.width * 4, QImage.Format_RGBA8888)
        self._tileset = QPixmap.fromImage(qimage.copy())
        self.viewport().update()
        return True

    def refresh(self):
        """Pull a fresh snapshot from the session and repaint."""
        self._snapshot = self._session.snapshot()
        self.tiles_changed.emit(len(self._snapshot.rectangles), len(self._snapshot.decals))
        self.viewport().update()

    def set_debug_overlay(self, enabled: bool):
        if self._session.debug_overlay != enabled:
            self._session.toggle_debug_overlay()
        self.debug_overlay_toggled.emit(enabled)
        self.refresh()

    def _scene_to_cell(self, scene_pos: QPointF):
        return self._session.grid.pixel_to_cell(scene_pos.x(), scene_pos.y())

    # ---------------------------------------------------------------
    # Drawing
    # ---------------------------------------------------------------

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw the background and cell grid."""
        super().drawBackground(painter, rect)

        grid = self._session.grid
        cs = grid.cell_size
        painter.setPen(QPen(QColor(sc.GRID_LINE_COLOR), 1))
        for i in range(grid.width + 1):
            painter.drawLine(QPointF(i * cs, 0), QPointF(i * cs, grid.height * cs))
        for j in range(grid.height + 1):
            painter.drawLine(QPointF(0, j * cs), QPointF(grid.width * cs, j * cs))

    def drawForeground(self, painter: QPainter, rect: QRectF):
        """Draw tiles, the optional debug overlay, then decals on top."""
        super().drawForeground(painter, rect)

        self._draw_tiles(painter)
        if self._snapshot.debug_overlay:
            self._draw_debug_overlay(painter)
        self._draw_decals(painter)

    def _draw_tiles(self, painter: QPainter):
        atlas = self._session.atlas
        snapshot = self._snapshot

        if self._tileset is not None:
            for tile_rect, source in zip(snapshot.rectangles, snapshot.rectangle_sources):
                dest = _qrect(atlas.rectangle_destination(tile_rect))
                painter.drawPixmap(dest, self._tileset, _qrect(source))
            return

        painter.setPen(QPen(QColor(sc.TILE_BORDER_COLOR), 2))
        painter.setBrush(QBrush(QColor(sc.TILE_FILL_COLOR)))
        for tile_rect in snapshot.rectangles:
            painter.drawRect(_qrect(atlas.rectangle_destination(tile_rect)))

    def _draw_debug_overlay(self, painter: QPainter):
        atlas = self._session.atlas
        painter.setPen(Qt.NoPen)
        for tile_rect in self._snapshot.rectangles:
            color = QColor(sc.DEBUG_RECT_COLORS.get(tile_rect.size_name, "#FFFFFF"))
            color.setAlphaF(sc.DEBUG_OVERLAY_OPACITY)
            painter.setBrush(QBrush(color))
            painter.drawRect(_qrect(atlas.rectangle_destination(tile_rect)))

    def _draw_decals(self, painter: QPainter):
        atlas = self._session.atlas

        if self._tileset is not None:
            for decal in self._snapshot.decals:
                source = atlas.decal_source(decal)
                x, y = atlas.decal_draw_position(decal)
                painter.drawPixmap(QRectF(x, y, source.w, source.h), self._tileset, _qrect(source))
            return

        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(QColor(sc.DECAL_COLOR)))
        for decal in self._snapshot.decals:
            painter.drawRect(self._decal_strip(decal))

    def _decal_strip(self, decal: EdgeDecal) -> QRectF:
        """Flat strip along the exposed side, used without a tileset."""
        cs = self._session.grid.cell_size
        t = cs * sc.DECAL_STRIP_RATIO
        x, y = decal.position
        if decal.side in (BlockSide.LEFT, BlockSide.RIGHT):
            return QRectF(x - t / 2, y, t, cs)
        return QRectF(x, y - t / 2, cs, t)

    # ---------------------------------------------------------------
    # Mouse events
    # ---------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent):
        """Left adds, right removes, middle toggles the debug overlay."""
        button = event.button()
        if button == Qt.MiddleButton:
            self.set_debug_overlay(not self._session.debug_overlay)
            event.accept()
            return

        if button in (Qt.LeftButton, Qt.RightButton):
            x, y = self._scene_to_cell(self.mapToScene(event.pos()))
            if self._session.set_tile(x, y, button == Qt.LeftButton):
                self.refresh()
            event.accept()
            return

        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        x, y = self._scene_to_cell(self.mapToScene(event.pos()))
        if self._session.grid.in_bounds(x, y):
            self.cell_hovered.emit(x, y)
        super().mouseMoveEvent(event)
