"""Exception types raised by the tile generator."""


class TileGeneratorError(Exception):
    pass


class TileSettingsError(TileGeneratorError):
    """Raised when a TileSettings instance fails validation."""
    pass


class TilesetError(TileGeneratorError):
    """Raised when a tileset image is missing or too small for the atlas layout."""
    pass
