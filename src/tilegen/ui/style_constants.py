"""
Centralized style constants for the tile editor UI.

Colors used by the canvas and the debug overlay. Use these constants instead
of hardcoded values.
"""

from PyQt5.QtCore import QSettings

# =============================================================================
# SETTINGS (persisted via QSettings)
# =============================================================================

SETTINGS_ORGANIZATION = 'TileGenerator'
SETTINGS_APPLICATION = 'TileEditor'


def get_settings() -> QSettings:
    return QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)


def debug_overlay_default() -> bool:
    return get_settings().value('debug_overlay', False, type=bool)


def save_debug_overlay(enabled: bool) -> None:
    get_settings().setValue('debug_overlay', enabled)


# =============================================================================
# CANVAS COLORS
# =============================================================================

BACKGROUND_COLOR = "#6495ED"      # Cornflower blue
GRID_LINE_COLOR = "#5580CC"
TILE_FILL_COLOR = "#8B6B4A"       # Used when no tileset image is loaded
TILE_BORDER_COLOR = "#5A432D"
DECAL_COLOR = "#4CAF50"           # Flat decal strip without a tileset

# Thickness of a flat decal strip as a fraction of the cell size
DECAL_STRIP_RATIO = 0.15

# =============================================================================
# DEBUG OVERLAY - one color per rectangle size
# =============================================================================

DEBUG_RECT_COLORS = {
    "2x2": "#FF0000",             # Red
    "2x1": "#008000",             # Green
    "1x2": "#9ACD32",             # Yellow green
    "1x1": "#FFFFFF",             # White
}

DEBUG_OVERLAY_OPACITY = 0.3
