"""
Tile Generator - generators package.

Derives renderable artifacts from an occupancy grid.
"""
