#!/usr/bin/env python3
"""
Tile Generator - Main Application Entry Point

Initializes the Qt application and launches the tile editor window.
"""

import argparse
import logging
import os
import sys

# Set Qt environment variables before importing Qt modules.
# These help with macOS rendering compatibility.
os.environ['QT_MAC_WANTS_LAYER'] = '1'

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tile Generator editor")
    parser.add_argument("--width", type=int, default=1280, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, default=720, help="Viewport height in pixels")
    parser.add_argument("--cell-size", type=int, default=64, help="Cell size in pixels")
    parser.add_argument("--chance-2x2", type=float, default=0.2, help="Chance of a 2x2 merge per cell")
    parser.add_argument("--chance-other", type=float, default=0.5, help="Chance of 2x1/1x2 merges per cell")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible sessions")
    parser.add_argument("--tileset", default=None, help="Tileset image to draw with")
    parser.add_argument("--validate", action="store_true", help="Validate every recompute")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main():
    """Main application entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from tilegen.config import TileSettings
    from tilegen.exceptions import TileSettingsError

    try:
        settings = TileSettings.for_viewport(
            args.width, args.height, args.cell_size,
            chance_2x2=args.chance_2x2,
            chance_other=args.chance_other,
            seed=args.seed,
            validate_output=args.validate,
        )
    except TileSettingsError as e:
        print(f"[MAIN] {e}", file=sys.stderr)
        return 2

    # Initialize Qt application
    app = QApplication(sys.argv)
    app.setApplicationName("Tile Generator")
    app.setOrganizationName("TileGenerator")
    app.setStyle("Fusion")

    from tilegen.ui.main_window import MainWindow
    window = MainWindow(settings, tileset_path=args.tileset)
    window.show()

    print("Tile Generator - Started")

    # Run the application
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
