"""
Tile Generator - UI Module

This module contains the PyQt5 editor for placing and removing tiles.
"""

from .main_window import MainWindow

__all__ = [
    'MainWindow'
]
