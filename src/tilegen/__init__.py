"""
Tile Generator - combines placed tiles into varied rectangles and edge decals.

The core lives in ``tilegen.generators.tiles``; ``tilegen.pipeline`` ties an
editing session together and ``tilegen.ui`` provides a small PyQt5 editor.
"""

__version__ = "0.1.0"
