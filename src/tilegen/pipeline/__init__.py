"""
Tile editing pipeline.

Runs edit -> combine -> decorate as one unit for an editing session.
"""

from .tile_session import TileEditSession, TileSnapshot

__all__ = [
    'TileEditSession',
    'TileSnapshot',
]
